"""
Tests for the EntityReference model.
"""

import pytest
from pydantic import ValidationError

from refcollection.enums import CollectionKind
from refcollection.models import EntityReference


class TestEntityReference:
    """Tests for EntityReference construction."""

    def test_create_with_kind(self):
        """Test creating a reference with a CollectionKind."""
        ref = EntityReference(collection=CollectionKind.SCHEMA, name="Customers", version=2)
        assert ref.collection is CollectionKind.SCHEMA
        assert ref.name == "Customers"
        assert ref.version == 2

    def test_collection_name_ignores_case(self):
        """Test collection strings resolve case-insensitively."""
        ref = EntityReference(collection="Mapping_Table", name="CountryCodes")
        assert ref.collection is CollectionKind.MAPPING_TABLE
        assert ref.version is None

    def test_unsupported_collection(self):
        """Test an unsupported collection fails validation."""
        with pytest.raises(ValidationError) as exc_info:
            EntityReference(collection="views", name="Customers")
        assert "not supported: views" in str(exc_info.value)

    def test_padded_collection_rejected(self):
        """Test surrounding whitespace is not stripped from the collection."""
        with pytest.raises(ValidationError):
            EntityReference(collection=" dataset", name="Customers")

    def test_name_is_stripped(self):
        """Test whitespace around the name is stripped."""
        ref = EntityReference(collection="dataset", name="  Customers ")
        assert ref.name == "Customers"

    def test_blank_name_rejected(self):
        """Test a blank name fails validation."""
        with pytest.raises(ValidationError):
            EntityReference(collection="dataset", name="   ")

    def test_version_must_be_positive(self):
        """Test versions start at 1."""
        with pytest.raises(ValidationError):
            EntityReference(collection="dataset", name="Customers", version=0)

    def test_frozen(self):
        """Test references are immutable."""
        ref = EntityReference(collection="dataset", name="Customers")
        with pytest.raises(ValidationError):
            ref.name = "Other"

    def test_to_dict(self):
        """Test serialization uses the collection value."""
        ref = EntityReference(collection="SCHEMA", name="Customers", version=1)
        assert ref.to_dict() == {"collection": "schema", "name": "Customers", "version": 1}

    def test_to_dict_omits_missing_version(self):
        """Test an unset version is left out."""
        ref = EntityReference(collection="dataset", name="Customers")
        assert ref.to_dict() == {"collection": "dataset", "name": "Customers"}


class TestEntityReferencePath:
    """Tests for reference path parsing and rendering."""

    def test_from_path_with_version(self):
        """Test parsing a versioned path."""
        ref = EntityReference.from_path("dataset/Customers/3")
        assert ref.collection is CollectionKind.DATASET
        assert ref.name == "Customers"
        assert ref.version == 3

    def test_from_path_without_version(self):
        """Test parsing a path without version."""
        ref = EntityReference.from_path("MAPPING_TABLE/CountryCodes")
        assert ref.collection is CollectionKind.MAPPING_TABLE
        assert ref.version is None

    def test_path(self):
        """Test rendering the path."""
        ref = EntityReference(collection="Mapping_Table", name="CountryCodes", version=4)
        assert ref.path == "mapping_table/CountryCodes/4"
        assert EntityReference(collection="schema", name="Customers").path == "schema/Customers"

    def test_route(self):
        """Test the UI route follows the collection."""
        assert EntityReference.from_path("schema/Customers").route == "schemas"

    @pytest.mark.parametrize("path", ["", "dataset", "dataset/Customers/3/extra"])
    def test_malformed_path(self, path):
        """Test paths without two or three segments are rejected."""
        with pytest.raises(ValueError, match="Invalid reference path"):
            EntityReference.from_path(path)

    def test_unsupported_collection_in_path(self):
        """Test an unsupported collection in a path fails validation."""
        with pytest.raises(ValidationError):
            EntityReference.from_path("tables/Customers")

    def test_non_numeric_version(self):
        """Test a non-numeric version fails validation."""
        with pytest.raises(ValidationError):
            EntityReference.from_path("dataset/Customers/latest")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
