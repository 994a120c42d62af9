"""Python Generator - orchestrates module generation from a Schema."""

from __future__ import annotations

from pathlib import Path

from chrome_remote_interface.adapters.python.renderers.module import (
    DEFAULT_PACKAGE,
    ModuleRenderer,
)
from chrome_remote_interface.domain import GeneratedModule, Schema
from chrome_remote_interface.errors import located
from chrome_remote_interface.manifest import (
    MANIFEST_FILENAME,
    GenerationManifest,
    OutputInfo,
    compute_content_hash,
    compute_schema_hash,
)

PACKAGE_INIT = "__init__.py"


class PythonGenerator:
    """
    Generate the rpc package from a Schema.

    Produces:
    - {Domain}.py - One module per domain (types, experimental(), commands)
    - __init__.py - PROTOCOL_VERSION, DOMAINS and protocol_version()

    Output is a pure function of the schema and the package name.
    """

    def __init__(self, package: str = DEFAULT_PACKAGE) -> None:
        self.package = package
        self.module_renderer = ModuleRenderer(package)

    def generate_modules(self, schema: Schema) -> list[GeneratedModule]:
        """Render every domain, in schema order."""
        modules = []
        for domain in schema.domains:
            with located(domain.name):
                modules.append(self.module_renderer.render(domain, schema.version))
        return modules

    def generate(self, schema: Schema) -> dict[str, str]:
        """
        Generate the source of every file in the package.

        Returns dict of {filename: content}.
        """
        files: dict[str, str] = {}
        for module in self.generate_modules(schema):
            files[module.filename] = module.source
        files[PACKAGE_INIT] = self.module_renderer.render_package(schema)
        return files

    def build_manifest(
        self, schema: Schema, files: dict[str, str]
    ) -> GenerationManifest:
        """Describe a set of generated files."""
        domains = {f"{d.name}.py": d.name for d in schema.domains}
        outputs = [
            OutputInfo(
                path=filename,
                hash=compute_content_hash(content),
                domain=domains.get(filename),
            )
            for filename, content in sorted(files.items())
        ]
        return GenerationManifest(
            protocol_version=schema.version,
            package=self.package,
            schema_hash=compute_schema_hash(schema),
            outputs=outputs,
        )

    def generate_and_write(
        self,
        schema: Schema,
        output_dir: str | Path,
        manifest: bool = True,
        clean: bool = True,
    ) -> list[Path]:
        """
        Generate and write the package to disk.

        With ``clean``, modules listed in a previous manifest but no longer
        generated are removed. Returns list of written file paths.
        """
        output_path = Path(output_dir)
        output_path.mkdir(parents=True, exist_ok=True)

        files = self.generate(schema)
        new_manifest = self.build_manifest(schema, files)
        manifest_path = output_path / MANIFEST_FILENAME

        if clean:
            previous = GenerationManifest.from_file(manifest_path)
            if previous is not None:
                for orphan in previous.find_orphaned_files(new_manifest.outputs):
                    (output_path / orphan).unlink(missing_ok=True)

        written: list[Path] = []
        for filename, content in files.items():
            file_path = output_path / filename
            file_path.write_text(content, encoding="utf-8")
            written.append(file_path)

        if manifest:
            manifest_path.write_text(new_manifest.to_json(), encoding="utf-8")
            written.append(manifest_path)

        return written
