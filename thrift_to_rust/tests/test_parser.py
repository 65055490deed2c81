import json
from pathlib import Path

import pytest

from thrift_to_rust.pipeline.errors import ProgramParseError
from thrift_to_rust.pipeline.schema_ast import (
    BaseKind,
    BaseType,
    EnumRef,
    ListType,
    MapType,
    ProgramParser,
    SetType,
    StructKind,
    StructRef,
    TypedefRef,
)

TEST_DATA = Path(__file__).parent / "test_data"


class TestProgramParser:
    """Test loading of program documents"""

    def test_type_expressions(self):
        program = ProgramParser().parse(
            {
                "name": "types",
                "enums": [{"name": "Mode", "values": [{"name": "ON", "value": 1}]}],
                "typedefs": [{"name": "Flags", "type": {"set": "Mode"}}],
                "structs": [
                    {
                        "name": "Holder",
                        "fields": [
                            {"id": 1, "name": "raw", "type": "i8"},
                            {"id": 2, "name": "flags", "type": "Flags"},
                            {"id": 3, "name": "table", "type": {"map": {"key": "string", "value": {"list": "Holder"}}}},
                        ],
                    }
                ],
            }
        )
        raw, flags, table = program.objects[0].members

        assert raw.type == BaseType(kind=BaseKind.BYTE)
        assert isinstance(flags.type, TypedefRef)
        assert flags.type.definition.type == SetType(elem_type=EnumRef(name="Mode"))
        assert isinstance(table.type, MapType)
        assert isinstance(table.type.value_type, ListType)
        # Recursive references point back at the declaration itself
        assert table.type.value_type.elem_type.definition is program.objects[0]

    def test_object_kinds(self):
        program = ProgramParser().parse(
            {
                "name": "kinds",
                "structs": [
                    {"name": "S"},
                    {"name": "U", "kind": "union"},
                    {"name": "E", "kind": "exception"},
                ],
            }
        )
        assert [s.kind for s in program.objects] == [StructKind.STRUCT, StructKind.UNION, StructKind.EXCEPTION]

    def test_unknown_object_kind(self):
        with pytest.raises(ProgramParseError, match="interface"):
            ProgramParser().parse({"name": "bad", "structs": [{"name": "S", "kind": "interface"}]})

    def test_unknown_type(self):
        with pytest.raises(ProgramParseError, match="Missing"):
            ProgramParser().parse({"name": "bad", "typedefs": [{"name": "T", "type": "Missing"}]})

    def test_invalid_map(self):
        with pytest.raises(ProgramParseError, match="key"):
            ProgramParser().parse({"name": "bad", "typedefs": [{"name": "T", "type": {"map": ["i32", "i32"]}}]})

    def test_typedef_cycle(self):
        with pytest.raises(ProgramParseError, match="cycle"):
            ProgramParser().parse(
                {
                    "name": "bad",
                    "typedefs": [{"name": "A", "type": "B"}, {"name": "B", "type": "A"}],
                }
            )

    def test_unknown_parent_service(self):
        with pytest.raises(ProgramParseError, match="Nowhere"):
            ProgramParser().parse({"name": "bad", "services": [{"name": "S", "extends": "Nowhere"}]})

    def test_missing_field_id(self):
        with pytest.raises(ProgramParseError, match="'id'"):
            ProgramParser().parse({"name": "bad", "structs": [{"name": "S", "fields": [{"name": "x", "type": "i32"}]}]})

    def test_parse_file_loads_includes(self):
        program = ProgramParser().parse_file(TEST_DATA / "tutorial.json")

        assert program.name == "tutorial"
        assert [include.name for include in program.includes] == ["shared"]
        calculator = program.services[0]
        assert calculator.program_name == "tutorial"
        assert calculator.extends.name == "SharedService"
        assert calculator.extends.program_name == "shared"
        assert len(program.consts) == 2

    def test_parse_file_name_override(self):
        program = ProgramParser().parse_file(TEST_DATA / "shared.json", name="common")
        assert program.name == "common"
        assert program.services[0].program_name == "common"

    def test_include_references(self, tmp_path):
        (tmp_path / "base.json").write_text(
            json.dumps({"name": "base", "structs": [{"name": "Item", "fields": []}]})
        )
        (tmp_path / "main.json").write_text(
            json.dumps(
                {
                    "name": "main",
                    "includes": ["base.json"],
                    "typedefs": [{"name": "Items", "type": {"list": "base.Item"}}],
                }
            )
        )
        program = ProgramParser().parse_file(tmp_path / "main.json")

        assert isinstance(program.typedefs[0].type.elem_type, StructRef)
        assert program.typedefs[0].type.elem_type.definition is program.includes[0].objects[0]

    def test_missing_include(self, tmp_path):
        (tmp_path / "main.json").write_text(json.dumps({"name": "main", "includes": ["absent.json"]}))
        with pytest.raises(ProgramParseError, match="absent.json"):
            ProgramParser().parse_file(tmp_path / "main.json")

    def test_unknown_include_scope(self):
        with pytest.raises(ProgramParseError, match="other"):
            ProgramParser().parse({"name": "bad", "typedefs": [{"name": "T", "type": "other.Thing"}]})

    @pytest.mark.parametrize(
        "alias_type",
        [
            {"list": "A"},
            {"set": {"list": "A"}},
            {"map": {"key": "string", "value": "B"}},
        ],
    )
    def test_typedef_cycle_through_containers(self, alias_type):
        with pytest.raises(ProgramParseError, match="cycle"):
            ProgramParser().parse(
                {
                    "name": "bad",
                    "typedefs": [{"name": "A", "type": alias_type}, {"name": "B", "type": {"list": "A"}}],
                }
            )

    def test_struct_recursion_through_typedef_is_allowed(self):
        program = ProgramParser().parse(
            {
                "name": "tree",
                "typedefs": [{"name": "Children", "type": {"list": "Node"}}],
                "structs": [{"name": "Node", "fields": [{"id": 1, "name": "children", "type": "Children"}]}],
            }
        )
        assert program.objects[0].members[0].type.definition is program.typedefs[0]

    @pytest.mark.parametrize(
        "services",
        [
            [{"name": "S", "extends": "S"}],
            [{"name": "S", "extends": "T"}, {"name": "T", "extends": "U"}, {"name": "U", "extends": "S"}],
        ],
    )
    def test_service_inheritance_cycle(self, services):
        with pytest.raises(ProgramParseError, match="inheritance cycle"):
            ProgramParser().parse({"name": "bad", "services": services})

    @pytest.mark.parametrize(
        "document, message",
        [
            ({"structs": [{"name": "S", "fields": [{"id": "one", "name": "x", "type": "i32"}]}]}, "'id' of field S.x"),
            ({"enums": [{"name": "E", "values": [{"name": "A", "value": None}]}]}, "'value' of enum E"),
        ],
    )
    def test_non_integer_ids(self, document, message):
        with pytest.raises(ProgramParseError, match=message):
            ProgramParser().parse({"name": "bad", **document})

    def test_invalid_json(self, tmp_path):
        (tmp_path / "broken.json").write_text("{not json")
        with pytest.raises(ProgramParseError, match="broken.json is not valid JSON"):
            ProgramParser().parse_file(tmp_path / "broken.json")

    def test_include_cycle(self, tmp_path):
        (tmp_path / "a.json").write_text(json.dumps({"name": "a", "includes": ["b.json"]}))
        (tmp_path / "b.json").write_text(json.dumps({"name": "b", "includes": ["a.json"]}))
        with pytest.raises(ProgramParseError, match="Include cycle through a.json"):
            ProgramParser().parse_file(tmp_path / "a.json")

    def test_shared_include_is_loaded_once(self, tmp_path):
        (tmp_path / "base.json").write_text(json.dumps({"name": "base"}))
        (tmp_path / "left.json").write_text(json.dumps({"name": "left", "includes": ["base.json"]}))
        (tmp_path / "main.json").write_text(json.dumps({"name": "main", "includes": ["base.json", "left.json"]}))
        program = ProgramParser().parse_file(tmp_path / "main.json")

        base, left = program.includes
        assert left.includes[0] is base

    def test_renamed_program_is_not_cached(self, tmp_path):
        (tmp_path / "base.json").write_text(json.dumps({"name": "base"}))
        (tmp_path / "main.json").write_text(json.dumps({"name": "main", "includes": ["base.json"]}))
        parser = ProgramParser()
        parser.parse_file(tmp_path / "base.json", name="renamed")
        program = parser.parse_file(tmp_path / "main.json")

        assert program.includes[0].name == "base"
