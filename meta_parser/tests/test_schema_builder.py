import logging

import pytest
from fake_clang import make_class, make_field, make_namespace, make_translation_unit

from meta_parser.pipeline.cursor import NodeKind
from meta_parser.pipeline.schema import SchemaBuilder, TypeTable


def build(*children):
    builder = SchemaBuilder()
    builder.build(make_translation_unit(list(children)))
    return builder


class TestSchemaBuilder:
    """Tree walk, grouping and type table"""

    def test_groups_classes_by_source_file(self):
        builder = build(
            make_class("m_Widget", "widget.h", annotations="All"),
            make_class("m_Gadget", "gadget.h", annotations="Fields"),
            make_class("m_Button", "widget.h", annotations="Methods"),
        )
        assert list(builder.schema_modules) == ["widget.h", "gadget.h"]
        widget_module = builder.schema_modules["widget.h"]
        assert widget_module.name == "widget.h"
        assert [c.name for c in widget_module.classes] == ["m_Widget", "m_Button"]

    def test_classes_without_flags_are_dropped(self):
        builder = build(
            make_class("Plain", "plain.h"),
            make_class("OnlyEnabled", "plain.h", annotations="Enable"),
        )
        assert builder.schema_modules == {}
        assert len(builder.type_table) == 0

    def test_forward_declarations_are_ignored(self):
        builder = build(make_class("m_Widget", "widget.h", annotations="All", definition=False))
        assert builder.schema_modules == {}

    def test_structs_are_collected(self):
        builder = build(make_class("Point", "math.h", annotations="Fields", kind=NodeKind.STRUCT_DECL))
        assert [c.name for c in builder.schema_modules["math.h"].classes] == ["Point"]

    def test_namespace_stack(self):
        builder = build(
            make_namespace(
                "Engine",
                [
                    make_namespace("Render", [make_class("Mesh", "mesh.h", annotations="All")]),
                    make_class("World", "world.h", annotations="All"),
                ],
            ),
            make_class("Root", "root.h", annotations="All"),
        )
        namespaces = {c.name: c.namespace for module in builder.schema_modules.values() for c in module.classes}
        assert namespaces == {
            "Mesh": ["Engine", "Render"],
            "World": ["Engine"],
            "Root": [],
        }

    def test_sibling_namespace_starts_clean(self):
        builder = build(
            make_namespace("NS1", [make_namespace("NS2", [make_class("Deep", "deep.h", annotations="All")])]),
            make_namespace("NS3", [make_class("Side", "side.h", annotations="All")]),
        )
        assert builder.schema_modules["deep.h"].classes[0].namespace == ["NS1", "NS2"]
        assert builder.schema_modules["side.h"].classes[0].namespace == ["NS3"]

    def test_anonymous_namespace_is_skipped(self):
        builder = build(make_namespace("", [make_class("Hidden", "hidden.h", annotations="All")]))
        assert builder.schema_modules == {}

    def test_nested_classes_are_not_visited(self):
        inner = make_class("Inner", "outer.h", annotations="All")
        outer = make_class("Outer", "outer.h", annotations="All", members=[inner, make_field("m_x", "int")])
        builder = build(outer)
        classes = builder.schema_modules["outer.h"].classes
        assert [c.name for c in classes] == ["Outer"]
        assert [f.name for f in classes[0].fields] == ["m_x"]

    def test_type_table_uses_display_name(self):
        builder = build(make_class("m_Widget", "widget.h", annotations="All"))
        assert builder.type_table.get_include_file("Widget") == "widget.h"
        assert builder.type_table.get_include_file("m_Widget") is None
        assert "Widget" in builder.type_table


class TestTypeTable:
    def test_collision_last_writer_wins(self, caplog):
        table = TypeTable()
        table.register("Widget", "a.h")
        with caplog.at_level(logging.WARNING):
            table.register("Widget", "b.h")
        assert table.get_include_file("Widget") == "b.h"
        assert "declared in both" in caplog.text

    def test_reregister_same_file_is_silent(self, caplog):
        table = TypeTable()
        with caplog.at_level(logging.WARNING):
            table.register("Widget", "a.h")
            table.register("Widget", "a.h")
        assert caplog.text == ""
        assert len(table) == 1


if __name__ == "__main__":
    pytest.main([__file__])
