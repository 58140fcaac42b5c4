"""Tests for the local uploads presence check."""

from pathlib import Path

from door_catalog_ops.services.assets import LocalAssetResolver, is_external
from tests.conftest import PLACEHOLDER, write_upload


def test_present_file_under_prefix(
    resolver: LocalAssetResolver, uploads_root: Path
) -> None:
    stored = write_upload(uploads_root, "final-filled/Цвет/model_cover.jpg")

    assert resolver.is_present(stored) is True


def test_non_local_paths_are_never_present(resolver: LocalAssetResolver) -> None:
    assert resolver.is_present("https://cdn.example.com/a.jpg") is False
    assert resolver.is_present("") is False
    assert resolver.is_present("uploads/a.jpg") is False


def test_missing_file_and_directory_are_not_present(
    resolver: LocalAssetResolver, uploads_root: Path
) -> None:
    (uploads_root / "folder").mkdir()

    assert resolver.is_present("/uploads/nope.jpg") is False
    assert resolver.is_present("/uploads/folder") is False
    assert resolver.is_present("/uploads/nope/child.jpg") is False


def test_placeholder_is_not_a_local_asset(uploads_root: Path) -> None:
    write_upload(uploads_root, "placeholders/door-missing.svg")
    resolver = LocalAssetResolver(root=uploads_root, placeholder=PLACEHOLDER)

    assert resolver.is_local(PLACEHOLDER) is False
    assert resolver.is_present(PLACEHOLDER) is False


def test_traversal_outside_root_is_rejected(
    resolver: LocalAssetResolver, uploads_root: Path
) -> None:
    (uploads_root.parent / "secret.txt").write_text("x")

    assert resolver.resolve("/uploads/../secret.txt") is None
    assert resolver.is_present("/uploads/../secret.txt") is False


def test_is_external() -> None:
    assert is_external("http://a/b.jpg")
    assert is_external("https://a/b.jpg")
    assert not is_external("/uploads/b.jpg")
    assert not is_external("не рассматриваем эту модель")
