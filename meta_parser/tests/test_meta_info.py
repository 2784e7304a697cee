import pytest
from fake_clang import FakeCursor, annotate, make_field

from meta_parser.pipeline.cursor import NodeKind
from meta_parser.pipeline.meta import MetaInfo, NativeProperty


def meta_for(*payloads):
    cursor = FakeCursor(NodeKind.FIELD_DECL, children=[annotate(payload) for payload in payloads])
    return MetaInfo(cursor)


class TestMetaInfo:
    """Annotation payload parsing"""

    def test_flags_and_values(self):
        meta = meta_for('Enable, default:"3"')
        assert meta.get_flag("Enable")
        assert meta.get_flag(NativeProperty.ENABLE)
        assert meta.get_property("default") == '"3"'

    def test_flag_without_value_is_present_and_empty(self):
        meta = meta_for("Fields")
        assert meta.get_flag(NativeProperty.FIELDS)
        assert meta.get_property(NativeProperty.FIELDS) == ""

    def test_missing_key(self):
        meta = meta_for("Fields")
        assert not meta.get_flag("Methods")
        assert meta.get_property("Methods") == ""

    def test_whitespace_is_trimmed(self):
        meta = meta_for("  All ,\tcategory :  physics \n")
        assert meta.properties == {"All": "", "category": "physics"}

    def test_empty_tokens_are_ignored(self):
        meta = meta_for(",, ,Fields,")
        assert meta.properties == {"Fields": ""}

    def test_empty_payload(self):
        assert meta_for("").properties == {}

    def test_last_write_wins_across_annotations(self):
        meta = meta_for("tag:first", "tag:second")
        assert meta.get_property("tag") == "second"

    def test_last_write_wins_within_annotation(self):
        meta = meta_for("tag:first, tag:second")
        assert meta.get_property("tag") == "second"

    def test_ignores_non_annotation_children(self):
        cursor = FakeCursor(
            NodeKind.CLASS_DECL,
            children=[annotate("All"), make_field("m_hp", "int", annotations="Disable")],
        )
        meta = MetaInfo(cursor)
        assert meta.properties == {"All": ""}

    def test_extract_properties_keeps_order(self):
        assert MetaInfo.extract_properties("b:1,a,c:3") == [("b", "1"), ("a", ""), ("c", "3")]


if __name__ == "__main__":
    pytest.main([__file__])
