"""Unit tests for store/filesystem.py"""

import pytest

from mdstore.config import Settings
from mdstore.errors import NotFound, StoreError, UnreadableDocument
from mdstore.store.filesystem import FileSystemStore, open_store


SWIFTY_PATH = "_drafts/2017-03-09-swifty-storyboards-sans-string-literals.md"
HELLO_PATH = "_posts/2016-11-20-hello-world.md"


@pytest.fixture(name="store")
def store_fixture(blog_dir):
    return FileSystemStore(blog_dir)


# --- list ---

def test_list_sorted_relative_paths(store):
    """list() returns sorted root-relative POSIX paths."""
    assert store.list() == [SWIFTY_PATH, HELLO_PATH]


def test_list_without_drafts(blog_dir):
    """include_drafts=False hides _drafts/."""
    assert FileSystemStore(blog_dir, include_drafts=False).list() == [HELLO_PATH]


def test_list_skips_hidden_site_and_other_files(blog_dir):
    """Hidden entries, _site output, non-markdown files, and directories are not documents."""
    (blog_dir / ".git").mkdir()
    (blog_dir / ".git" / "notes.md").write_text("x")
    (blog_dir / ".hidden.md").write_text("x")
    (blog_dir / "_site").mkdir()
    (blog_dir / "_site" / "index.md").write_text("x")
    (blog_dir / "_config.yml").write_text("title: blog\n")
    (blog_dir / "folder.md").mkdir()
    (blog_dir / "about.markdown").write_text("About\n")
    assert FileSystemStore(blog_dir).list() == [SWIFTY_PATH, HELLO_PATH, "about.markdown"]


def test_list_missing_root(tmp_path):
    """A root that does not exist is an empty store."""
    store = FileSystemStore(tmp_path / "nope")
    assert store.list() == []
    with pytest.raises(NotFound):
        store.read("nonexistent.md")


def test_list_empty_root(tmp_path):
    """An empty directory is an empty store."""
    store = FileSystemStore(tmp_path)
    assert store.list() == []
    with pytest.raises(NotFound):
        store.read("nonexistent.md")


# --- read ---

def test_read_returns_document(store):
    """read() parses front matter and keeps the requested path."""
    doc = store.read(SWIFTY_PATH)
    assert doc.path == SWIFTY_PATH
    assert doc.front_matter["title"] == "Swifty Storyboards Sans String Literals"
    assert doc.front_matter["categories"] == "storyboard string"


def test_every_listed_path_is_readable(store):
    """read(p).path == p for all p in list()."""
    for path in store.list():
        assert store.read(path).path == path


def test_single_file_scenario(tmp_path, swifty_text):
    """A store with exactly one post lists exactly that path."""
    (tmp_path / "post.md").write_text(swifty_text, encoding="utf-8")
    store = FileSystemStore(tmp_path)
    assert store.list() == ["post.md"]
    assert store.read("post.md").front_matter["title"] == "Swifty Storyboards Sans String Literals"


@pytest.mark.parametrize("path", [
    "nonexistent.md",
    "_drafts",
    "_config.yml",
    "../outside.md",
    "/etc/passwd.md",
    ".secret.md",
])
def test_read_unlisted_raises_not_found(blog_dir, path):
    """Paths outside list() raise NotFound, even when a file exists there."""
    (blog_dir / "_config.yml").write_text("title: blog\n")
    (blog_dir / ".secret.md").write_text("x")
    (blog_dir.parent / "outside.md").write_text("x")
    store = FileSystemStore(blog_dir)
    assert path not in store.list()
    with pytest.raises(NotFound):
        store.read(path)


def test_read_draft_when_drafts_excluded(blog_dir):
    """Drafts are unknown paths when include_drafts is False."""
    with pytest.raises(NotFound):
        FileSystemStore(blog_dir, include_drafts=False).read(SWIFTY_PATH)


def test_read_preserves_crlf(tmp_path):
    """CRLF line endings survive reading, so text matches the file bytes."""
    raw = b"---\r\nlayout: post\r\ntitle: CRLF\r\n---\r\nBody\r\n"
    (tmp_path / "crlf.md").write_bytes(raw)
    doc = FileSystemStore(tmp_path).read("crlf.md")
    assert doc.front_matter["title"] == "CRLF"
    assert doc.text.encode("utf-8") == raw


# --- open_store ---

def test_open_store_from_settings(blog_dir):
    """open_store honours content_dir and include_drafts."""
    store = open_store(Settings(content_dir=str(blog_dir), include_drafts=False))
    assert isinstance(store, FileSystemStore)
    assert store.list() == [HELLO_PATH]


def test_read_invalid_utf8_raises_store_error(tmp_path):
    """A listed file that is not UTF-8 fails with UnreadableDocument naming the path."""
    (tmp_path / "bad.md").write_bytes(b"---\ntitle: x\n---\n\xff\xfe\n")
    store = FileSystemStore(tmp_path)
    assert store.list() == ["bad.md"]
    with pytest.raises(UnreadableDocument, match="bad.md") as exc:
        store.read("bad.md")
    assert isinstance(exc.value, StoreError)
    assert exc.value.path == "bad.md"
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)
