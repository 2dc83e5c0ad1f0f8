"""Tests for the public package API."""

import zipfile

import nupkg_builder


class TestPublicExports:
    """Test the names re-exported from the package root."""

    def test_all_exports_resolve(self):
        for name in nupkg_builder.__all__:
            assert getattr(nupkg_builder, name) is not None

    def test_errors_share_a_base(self):
        for error in (
            nupkg_builder.MissingVersionError,
            nupkg_builder.SourceNotFoundError,
            nupkg_builder.InvalidPathError,
            nupkg_builder.OutputPathError,
        ):
            assert issubclass(error, nupkg_builder.NupkgError)
        assert issubclass(nupkg_builder.MissingVersionError, nupkg_builder.FatalConfigurationError)


class TestWriteFromParams:
    """Test writing a package described by a plain dictionary."""

    def test_params_to_archive(self, working_dir, output_dir):
        params = nupkg_builder.PackageWriteParams.model_validate(
            {
                "id": "Foo",
                "version": "1.0.0",
                "description": "Foo package",
                "authors": ["Alice"],
                "dependencies": [{"id": "Bar", "version": "[1.0, 2.0)"}],
                "files": [["bin", "lib/net45"]],
                "files_excluded": ["bin/sub"],
            }
        )

        output_path = nupkg_builder.write_package(
            params.to_core_info(), params.to_optional_info(), str(working_dir), str(output_dir)
        )

        with zipfile.ZipFile(output_path) as zf:
            names = zf.namelist()
            manifest = zf.read("Foo.nuspec").decode("utf-8")
        assert "lib/net45/a.dll" in names
        assert "lib/net45/sub/b.txt" not in names
        assert '<dependency id="Bar" version="[1.0, 2.0)" />' in manifest
