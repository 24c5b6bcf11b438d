"""Tests for resource collection."""

from __future__ import annotations

from pathlib import Path

import pytest

from imgres.config.options import GeneratorOptions
from imgres.errors import NameCollisionError
from imgres.resources.collector import (
    check_name_collisions,
    collect_collections,
    collect_resources,
)
from imgres.resources.models import ResourceCollection, ResourceEntry


def _by_name(collections: list[ResourceCollection]) -> dict[str, ResourceCollection]:
    return {collection.name: collection for collection in collections}


class TestCollectCollections:
    """Test walking a directory tree into collections."""

    def test_root_collection_is_last(self, image_tree: Path) -> None:
        """Test the root collection closes the result."""
        collections = collect_collections(image_tree, image_tree)
        assert collections[-1].name == "ImageResources"

    def test_children_before_parents(self, image_tree: Path) -> None:
        """Test every subdirectory collection precedes its parent's."""
        names = [c.name for c in collect_collections(image_tree, image_tree)]
        assert names.index("TabsResources") < names.index("IconsResources")
        assert names.index("IconsResources") < names.index("ImageResources")
        assert names.index("EmptyResources") < names.index("ImageResources")

    def test_empty_directory_yields_collection(self, image_tree: Path) -> None:
        """Test a directory without files still produces a collection."""
        collections = _by_name(collect_collections(image_tree, image_tree))
        assert collections["EmptyResources"].entries == []

    def test_density_variants_excluded(self, image_tree: Path) -> None:
        """Test files containing @ never become entries."""
        for collection in collect_collections(image_tree, image_tree):
            for entry in collection.entries:
                assert "@" not in entry.filename

        root = _by_name(collect_collections(image_tree, image_tree))["ImageResources"]
        assert [entry.filename for entry in root.entries] == ["photo.png"]

    def test_subdirectory_entries(self, image_tree: Path) -> None:
        """Test entries are grouped by their own directory."""
        collections = _by_name(collect_collections(image_tree, image_tree))
        icons = collections["IconsResources"]

        assert [entry.filename for entry in icons.entries] == ["home.png"]
        assert icons.entries[0].directory == image_tree / "icons"
        assert icons.entries[0].relative_resource_path == "./icons/home.png"

    def test_collection_count(self, image_tree: Path) -> None:
        """Test one collection per directory."""
        assert len(collect_collections(image_tree, image_tree)) == 4


class TestCollectResources:
    """Test collection driven by generator options."""

    def test_paths_relative_to_output(self, image_tree: Path) -> None:
        """Test resource paths are relative to the output file's directory."""
        options = GeneratorOptions(dir=image_tree, out=image_tree.parent / "images.ts")
        root = collect_resources(options)[-1]
        assert root.entries[0].relative_resource_path == "./images/photo.png"

    def test_read_prefix(self, image_tree: Path) -> None:
        """Test the read prefix moves the base directory."""
        options = GeneratorOptions(
            dir=image_tree,
            out=image_tree.parent / "src" / "gen" / "images.ts",
            read=Path(".."),
        )
        root = collect_resources(options)[-1]
        assert root.entries[0].relative_resource_path == "../images/photo.png"


class TestCheckNameCollisions:
    """Test detection of clashing generated names."""

    def test_unique_names_pass(self, image_tree: Path) -> None:
        """Test a tree without clashes is accepted."""
        check_name_collisions(collect_collections(image_tree, image_tree))

    def test_same_named_directories(self, tmp_path: Path) -> None:
        """Test sibling subtrees sharing a basename are rejected."""
        (tmp_path / "a" / "icons").mkdir(parents=True)
        (tmp_path / "b" / "icons").mkdir(parents=True)

        collections = collect_collections(tmp_path, tmp_path)

        with pytest.raises(NameCollisionError, match="IconsResources"):
            check_name_collisions(collections)

    def test_same_member_name(self, tmp_path: Path) -> None:
        """Test two files mapping to one member are rejected."""
        collection = ResourceCollection(
            name="ImageResources",
            directory=tmp_path,
            entries=[
                ResourceEntry(directory=tmp_path, output_dir=tmp_path, filename=name)
                for name in ("logo.png", "logo.jpg")
            ],
        )

        with pytest.raises(NameCollisionError) as exc_info:
            check_name_collisions([collection])

        assert exc_info.value.name == "logo"
        assert exc_info.value.scope == "ImageResources"
