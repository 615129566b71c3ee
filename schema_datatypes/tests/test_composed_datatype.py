import dataclasses

import pytest

from schema_datatypes.errors import DataTypeError
from schema_datatypes.model import (
    ComposedObjectDataType,
    CompositionKind,
    DataType,
    DataTypeConstraints,
    DoubleDataType,
    LocalDateDataType,
    LongDataType,
    ModelDataType,
    NoDataType,
    ObjectDataType,
    StringDataType,
)


@pytest.fixture
def long_type():
    return LongDataType()


@pytest.fixture
def string_type():
    return StringDataType()


@pytest.fixture
def base(long_type):
    return ModelDataType("Base", "model", {"id": long_type})


@pytest.fixture
def named(string_type):
    return ModelDataType("Name", "model.names", {"name": string_type})


class TestAllOfProperties:
    def test_constituent_properties_are_merged_in_order(self, base, named, long_type, string_type):
        pet = ComposedObjectDataType("Pet", "model", CompositionKind.ALL_OF, [base, named])

        assert list(pet.properties.items()) == [("id", long_type), ("name", string_type)]

    def test_later_constituent_overrides_type_in_place(self):
        a_x, a_y = LongDataType(), StringDataType()
        b_y, b_z = DoubleDataType(), LongDataType()
        a = ModelDataType("A", "model", {"x": a_x, "y": a_y})
        b = ModelDataType("B", "model", {"y": b_y, "z": b_z})

        composed = ComposedObjectDataType("AB", "model", "allOf", [a, b])

        assert list(composed.properties) == ["x", "y", "z"]
        assert composed.properties["x"] is a_x
        assert composed.properties["y"] is b_y
        assert composed.properties["z"] is b_z

    def test_non_object_constituents_contribute_nothing(self, base, long_type):
        composed = ComposedObjectDataType("Pet", "model", "allOf", [LongDataType(), base, NoDataType("Unknown")])
        assert list(composed.properties.items()) == [("id", long_type)]

    def test_no_object_constituents_means_no_properties(self):
        composed = ComposedObjectDataType("Pet", "model", "allOf", [LongDataType(), StringDataType()])
        assert dict(composed.properties) == {}

    def test_empty_constituents(self):
        composed = ComposedObjectDataType("Pet", "model")
        assert composed.kind is CompositionKind.ALL_OF
        assert dict(composed.properties) == {}
        assert composed.imports == {"model.Pet"}

    def test_nested_composition_is_flattened(self, base, named, long_type, string_type):
        inner = ComposedObjectDataType("Inner", "model", "allOf", [base])
        outer = ComposedObjectDataType("Outer", "model", "allOf", [inner, named])

        assert list(outer.properties.items()) == [("id", long_type), ("name", string_type)]
        assert outer.imports == {"model.Base", "model.Inner", "model.names.Name", "model.Outer"}

    def test_derivation_is_repeatable(self, base, named):
        pet = ComposedObjectDataType("Pet", "model", "allOf", [base, named])

        assert list(pet.properties.items()) == list(pet.properties.items())
        assert pet.imports == pet.imports

    def test_for_each_visits_merged_properties(self, base, named):
        pet = ComposedObjectDataType("Pet", "model", "allOf", [base, named])

        visited = []
        pet.for_each(lambda name, datatype: visited.append(name))
        assert visited == ["id", "name"]

    def test_constituents_are_shared_not_copied(self, base, named):
        pet = ComposedObjectDataType("Pet", "model", "allOf", [base, named])
        dog = ComposedObjectDataType("Dog", "model", "allOf", [base])

        assert pet.constituents[0] is base
        assert dog.constituents[0] is base
        assert isinstance(pet.constituents, tuple)


class TestComposedImports:
    def test_union_of_constituent_imports_and_own_name(self, base, named):
        pet = ComposedObjectDataType("Pet", "model", "allOf", [base, named])

        assert pet.referenced_imports == {"model.Base", "model.names.Name"}
        assert pet.imports == {"model.Base", "model.names.Name", "model.Pet"}

    def test_primitive_and_unresolved_constituents_are_not_imported(self, base):
        pet = ComposedObjectDataType("Pet", "model", "allOf", [base, LocalDateDataType(), NoDataType("Unknown")])
        assert pet.imports == {"model.Base", "model.Pet"}

    def test_repeated_constituent_collapses(self, base):
        pet = ComposedObjectDataType("Pet", "model", "allOf", [base, base])
        assert pet.imports == {"model.Base", "model.Pet"}


class TestComposedRequired:
    def test_required_comes_from_composition_only(self, string_type):
        optional_x = ModelDataType("A", "model", {"x": string_type}, constraints=DataTypeConstraints(required=[]))
        composed = ComposedObjectDataType(
            "Pet", "model", "allOf", [optional_x], constraints=DataTypeConstraints(required=["x"])
        )
        assert composed.is_required("x")

    def test_constituent_required_is_not_inherited(self, string_type):
        required_x = ModelDataType("A", "model", {"x": string_type}, constraints=DataTypeConstraints(required=["x"]))
        composed = ComposedObjectDataType("Pet", "model", "allOf", [required_x])

        assert required_x.is_required("x")
        assert not composed.is_required("x")


class TestComposedContract:
    def test_has_object_capability(self, base):
        pet = ComposedObjectDataType("Pet", "model", "allOf", [base])
        assert isinstance(pet, DataType)
        assert isinstance(pet, ObjectDataType)

    def test_kind_accepts_keyword(self):
        assert ComposedObjectDataType("Pet", "model", "oneOf").kind is CompositionKind.ONE_OF

    def test_unknown_kind_fails_at_construction(self):
        with pytest.raises(DataTypeError, match="noneOf"):
            ComposedObjectDataType("Pet", "model", "noneOf")

    def test_missing_constituent_fails_at_construction(self, base):
        with pytest.raises(DataTypeError, match="Constituent 1"):
            ComposedObjectDataType("Pet", "model", "allOf", [base, None])

    @pytest.mark.parametrize("kind", [CompositionKind.ONE_OF, CompositionKind.ANY_OF])
    def test_other_kinds_are_not_flattened(self, kind, base, named):
        composed = ComposedObjectDataType("Pet", "model", kind, [base, named])

        assert not composed.is_flattened
        assert dict(composed.properties) == {}
        assert composed.imports == {"model.Base", "model.names.Name", "model.Pet"}

    def test_optional_attributes(self):
        pet = ComposedObjectDataType("Pet", "model", deprecated=True)
        assert pet.deprecated is True
        assert pet.documentation is None
        assert pet.namespace == "model"
        assert pet.name == "Pet"


class TestComposedImmutability:
    @pytest.mark.parametrize(
        "attribute, value",
        [
            ("constituents", ()),
            ("kind", CompositionKind.ONE_OF),
            ("name", "Dog"),
            ("constraints", DataTypeConstraints(required=["id"])),
        ],
    )
    def test_attributes_cannot_be_reassigned(self, attribute, value, base):
        pet = ComposedObjectDataType("Pet", "model", "allOf", [base])
        with pytest.raises(dataclasses.FrozenInstanceError):
            setattr(pet, attribute, value)

        assert pet.constituents == (base,)
        assert pet.kind is CompositionKind.ALL_OF

    def test_constituents_cannot_be_modified_through_caller_list(self, base, named):
        constituents = [base]
        pet = ComposedObjectDataType("Pet", "model", "allOf", constituents)
        constituents.append(named)

        assert pet.constituents == (base,)
        assert list(pet.properties) == ["id"]

    def test_properties_view_is_read_only(self, base, string_type):
        pet = ComposedObjectDataType("Pet", "model", "allOf", [base])
        with pytest.raises(TypeError):
            pet.properties["name"] = string_type
