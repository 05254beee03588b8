import pytest
import tempfile
from pathlib import Path
from git import Repo

# Messages covering the boundary cases of header/body splitting
MESSAGE_CORPUS = [
    "",
    "\n",
    "\n\n",
    "\r\n",
    "   ",
    "  \nTest",
    "Fix bug",
    "Fix bug\n",
    "Fix bug\n\n",
    "Fix bug\n\n\n",
    "Fix bug\nDetails",
    "Fix bug\nDetails\n",
    "Fix bug\n\nDetails",
    "Fix bug\n\n\nDetails",
    "Fix bug\r\n\r\nDetails\r\n",
    "Fix bug\r\n\r\n\r\nDetails",
    "Fix bug\n\nFirst paragraph\n\nSecond paragraph\n",
    "x" * 51,
    "x" * 53 + "\n\n" + "y" * 74,
    "x" * 80 + "\nno blank line\n" + "z" * 100,
    "Fix bug\n\n" + "y" * 72 + "\n" + "y" * 73 + "\n" + "y" * 90,
    "Fix bug\n\n" + "y" * 74 + "\r\n",
    "é" * 30,
    "Résumé support\n\n" + "ü" * 40,
    "Résumé support\n\n\n\n" + "ü" * 40 + "\n",
    "\n\n" + "0123456789" * 8,
]

@pytest.fixture(params=MESSAGE_CORPUS, ids=repr)
def any_message(request):
    """Each message of the corpus in turn."""
    return request.param

@pytest.fixture
def temp_git_repo():
    """Create a temporary git repository with a few commits."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        repo = Repo.init(tmp_dir)

        test_file = Path(tmp_dir) / "test.txt"
        test_file.write_text("Initial content")
        repo.index.add(["test.txt"])
        repo.index.commit("Initial commit\n\nAdd the first file to the repository.\n")

        test_file.write_text("Changed content")
        repo.index.add(["test.txt"])
        repo.index.commit("Change the content\nwithout a blank line")

        yield tmp_dir

@pytest.fixture
def clean_environment(monkeypatch):
    """Remove config overrides from the environment."""
    for name in [
        "COMMITTABLE_OUTPUT_FORMAT",
        "COMMITTABLE_COLOR",
        "COMMITTABLE_QUIET",
        "COMMITTABLE_ALWAYS_LOG",
        "COMMITTABLE_LOG_FILE",
    ]:
        monkeypatch.delenv(name, raising=False)
    yield
