"""End-to-end tests for loading and saving desktop files."""

import pytest

from rmenu.desktop_entry import (
    ActionSection,
    EntrySection,
    OpaqueSection,
    dumps,
    load_desktop_file,
    loads,
    save_desktop_file,
)
from rmenu.exceptions import (
    DesktopFileReadError,
    DuplicateMainEntryError,
    MissingRequiredFieldError,
)

GALLERY_ONLY = """\
[Desktop Entry]
Type=Application
Name=Foo Viewer
Name[de]=Foo Betrachter
Exec=fooview %F
MimeType=image/x-foo;
Actions=Gallery;

[Desktop Action Gallery]
Name=Browse Gallery
Exec=fooview --gallery
"""

GALLERY_NORMALIZED = GALLERY_ONLY.replace(
    "MimeType=image/x-foo;\nActions=Gallery;\n",
    "Actions=Gallery;\nMimeType=image/x-foo;\n",
)


class TestLoads:
    """Test loads/dumps on complete files."""

    def test_two_section_document(self):
        doc = loads(GALLERY_ONLY)

        assert list(doc) == ["Desktop Entry", "Desktop Action Gallery"]
        entry = doc["Desktop Entry"]
        assert isinstance(entry, EntrySection)
        assert entry.entry.name.get("de") == "Foo Betrachter"
        assert entry.entry.name.get("") == "Foo Viewer"
        assert entry.entry.mime_type == ["image/x-foo"]
        assert entry.entry.actions == ["Gallery"]

        gallery = doc["Desktop Action Gallery"]
        assert isinstance(gallery, ActionSection)
        assert gallery.action_id == "Gallery"
        assert gallery.action.exec == "fooview --gallery"

    def test_dumps_two_section_document(self):
        text = dumps(loads(GALLERY_ONLY))

        assert text == GALLERY_NORMALIZED
        for line in (
            "Name=Foo Viewer",
            "Name[de]=Foo Betrachter",
            "MimeType=image/x-foo;",
            "Actions=Gallery;",
        ):
            assert line in text.splitlines()

    def test_full_example(self, foo_viewer_text):
        doc = loads(foo_viewer_text)

        assert doc.entry.version == "1.0"
        assert doc.entry.try_exec == "fooview"
        assert [action_id for action_id, _ in doc.actions()] == [
            "Gallery",
            "Create",
        ]
        create = dict(doc.actions())["Create"]
        assert create.icon == {"": "fooview-new"}

    def test_round_trip_is_stable(self, foo_viewer_text):
        once = dumps(loads(foo_viewer_text))
        assert dumps(loads(once)) == once
        assert loads(once) == loads(foo_viewer_text)

    def test_normalizes_output(self):
        text = (
            "[Desktop Entry]\n"
            "X-Zed=1\n"
            "Categories=A;;B\n"
            "Terminal=FALSE\n"
            "Name=Tool\n"
            "Type=Application\n"
            "X-Alpha=2\n"
        )

        assert dumps(loads(text)) == (
            "[Desktop Entry]\n"
            "Type=Application\n"
            "Name=Tool\n"
            "Terminal=false\n"
            "Categories=A;B;\n"
            "X-Alpha=2\n"
            "X-Zed=1\n"
        )

    def test_opaque_sections_pass_through(self):
        text = (
            "[Desktop Entry]\nType=Link\nName=Docs\nURL=https://x\n\n"
            "[X-Vendor Settings]\nFlag=maybe\nList=a;;b\n"
        )
        doc = loads(text)

        assert doc["X-Vendor Settings"] == OpaqueSection(
            {"Flag": "maybe", "List": "a;;b"}
        )
        assert dumps(doc) == text

    def test_duplicate_main_entry(self):
        text = "[Desktop Entry]\nType=A\nName=a\n[Desktop Entry]\nType=A\n"
        with pytest.raises(DuplicateMainEntryError):
            loads(text)

    def test_missing_name(self):
        with pytest.raises(MissingRequiredFieldError):
            loads("[Desktop Entry]\nType=Application\nExec=foo\n")

    def test_empty_text(self):
        doc = loads("")
        assert len(doc) == 0
        assert dumps(doc) == ""


class TestDesktopFiles:
    """Test load_desktop_file/save_desktop_file."""

    def test_load(self, foo_viewer_file):
        doc = load_desktop_file(foo_viewer_file)
        assert doc.entry.exec == "fooview %F"

    def test_load_accepts_str_path(self, foo_viewer_file):
        assert load_desktop_file(str(foo_viewer_file)).entry is not None

    def test_load_missing_file(self, tmp_path):
        path = tmp_path / "missing.desktop"
        with pytest.raises(DesktopFileReadError) as exc_info:
            load_desktop_file(path)
        assert exc_info.value.path == path
        assert "missing.desktop" in str(exc_info.value)

    def test_load_invalid_utf8(self, tmp_path):
        path = tmp_path / "broken.desktop"
        path.write_bytes(b"[Desktop Entry]\nName=\xff\xfe\n")
        with pytest.raises(DesktopFileReadError):
            load_desktop_file(path)

    def test_save_creates_parents(self, tmp_path, foo_viewer_text):
        path = tmp_path / "nested" / "dir" / "out.desktop"
        doc = loads(foo_viewer_text)

        written = save_desktop_file(path, doc)

        assert written == path
        assert load_desktop_file(path) == doc
        assert path.read_text(encoding="utf-8") == dumps(doc)
