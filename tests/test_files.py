"""Tests for file collection loading."""

from content_images.files import load_file_collection


class TestLoadFileCollection:
    """Test load_file_collection function."""

    def test_loads_relative_posix_paths(self, site_dir, site_paths):
        """Test every file is keyed by its relative POSIX path."""
        files = load_file_collection(site_dir)

        assert list(files) == sorted(site_paths)

    def test_records_start_empty(self, site_dir):
        """Test records carry no metadata yet."""
        files = load_file_collection(site_dir)

        assert all(record == {} for record in files.values())

    def test_directories_skipped(self, temp_dir):
        """Test that empty directories do not become entries."""
        (temp_dir / "empty" / "nested").mkdir(parents=True)

        assert load_file_collection(temp_dir) == {}
