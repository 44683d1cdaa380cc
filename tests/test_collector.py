import pytest

from i18n_formats.collector import collect_resources, language_from_filename
from i18n_formats.errors import MalformedFilename, NoInputFiles


class TestLanguageFromFilename:
    """Test language extraction from resource file names"""

    def test_language_segment(self):
        test_cases = [
            ("uiMessages_en.properties", "en"),
            ("res/uiMessages_fr.properties", "fr"),
            ("some_dir/messages_de.properties", "de"),
        ]

        for path, expected in test_cases:
            assert language_from_filename(path) == expected

    def test_wrong_segment_count(self):
        test_cases = [
            ("messages.properties", 2),
            ("ui_messages_en.properties", 4),
        ]

        for path, parts in test_cases:
            with pytest.raises(MalformedFilename) as e:
                language_from_filename(path)
            assert e.value.parts == parts
            assert path in str(e.value)


class TestCollectResources:
    """Test recursive directory scanning"""

    def test_lexical_walk_order(self, tmp_path):
        (tmp_path / "uiMessages_fr.properties").write_text("greeting=Bonjour\n")
        (tmp_path / "uiMessages_en.properties").write_text("greeting=Hello\n")
        (tmp_path / "notes.txt").write_text("ignored")
        nested = tmp_path / "nested"
        nested.mkdir()
        (nested / "uiMessages_de.properties").write_text("greeting=Hallo\n")

        languages, files = collect_resources(tmp_path)

        assert languages == ["en", "fr", "de"]
        assert [f.split("/")[-1] for f in files] == [
            "uiMessages_en.properties", "uiMessages_fr.properties", "uiMessages_de.properties"
        ]

    def test_no_files(self, tmp_path):
        (tmp_path / "readme.txt").write_text("nothing here")
        with pytest.raises(NoInputFiles):
            collect_resources(tmp_path)

    def test_malformed_filename(self, tmp_path):
        (tmp_path / "messages.properties").write_text("greeting=Hello\n")
        with pytest.raises(MalformedFilename):
            collect_resources(tmp_path)
