"""Shared test fixtures: sample commit files, commit directories, temp git repos."""

from __future__ import annotations

import subprocess
import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def three_kind_commit() -> str:
    """A commit touching one Kconfig file, one Makefile, and one C file."""
    return textwrap.dedent("""\
        2011-06-10 06:01:30 +0200
        diff --git a/drivers/net/Kconfig b/drivers/net/Kconfig
        index 1111111..2222222 100644
        --- a/drivers/net/Kconfig
        +++ b/drivers/net/Kconfig
        @@ -1,3 +1,6 @@
         config NET_FOO
         \tbool "Foo support"
        +\tdepends on PCI
        +\thelp
        +\t  Say Y here to enable foo.
        diff --git a/drivers/net/Makefile b/drivers/net/Makefile
        index 3333333..4444444 100644
        --- a/drivers/net/Makefile
        +++ b/drivers/net/Makefile
        @@ -1,2 +1,3 @@
         obj-y += core.o
        +obj-$(CONFIG_NET_FOO) += foo.o
        +ccflags-y += -DDEBUG
        diff --git a/drivers/net/foo.c b/drivers/net/foo.c
        index 5555555..6666666 100644
        --- a/drivers/net/foo.c
        +++ b/drivers/net/foo.c
        @@ -10,4 +10,7 @@
         static int foo_init(void)
         {
        +#ifdef CONFIG_NET_FOO_DEBUG
        +\tpr_debug("init");
        +#endif
         \treturn 0;
         }
    """)


@pytest.fixture
def documentation_commit() -> str:
    """A commit changing documentation only."""
    return textwrap.dedent("""\
        2012-01-15 12:00:00 +0000
        diff --git a/Documentation/networking/foo.txt b/Documentation/networking/foo.txt
        index 7777777..8888888 100644
        --- a/Documentation/networking/foo.txt
        +++ b/Documentation/networking/foo.txt
        @@ -1 +1 @@
        -Old description.
        +New description.
    """)


@pytest.fixture
def mode_only_commit() -> str:
    """A commit changing file permissions only (no hunks)."""
    return textwrap.dedent("""\
        2012-02-01 08:30:00 +0100
        diff --git a/scripts/setlocalversion b/scripts/setlocalversion
        old mode 100644
        new mode 100755
    """)


@pytest.fixture
def commit_dir(tmp_path: Path, three_kind_commit: str, mode_only_commit: str) -> Path:
    """A directory of commit files as produced by ``commitvar extract``."""
    commits = tmp_path / "commits"
    commits.mkdir()
    (commits / "a1b2c3d4.txt").write_text(three_kind_commit, encoding="utf-8")
    (commits / "e5f6a7b8.txt").write_text(mode_only_commit, encoding="utf-8")
    (commits / "README.md").write_text("not a commit\n", encoding="utf-8")
    return commits


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    repo = tmp_path / "repo"
    repo.mkdir()
    subprocess.run(["git", "init", str(repo)], capture_output=True, check=True)
    subprocess.run(
        ["git", "config", "user.email", "test@test.com"],
        cwd=repo, capture_output=True, check=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test"],
        cwd=repo, capture_output=True, check=True,
    )
    # Initial commit
    readme = repo / "README.md"
    readme.write_text("# Test\n")
    subprocess.run(["git", "add", "."], cwd=repo, capture_output=True, check=True)
    subprocess.run(
        ["git", "commit", "-m", "init"],
        cwd=repo, capture_output=True, check=True,
    )
    return repo
