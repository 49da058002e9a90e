"""Drive the assemblers over service metadata and write the generated classes."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .assemblers import Assembler, AssemblerError, discover_assemblers
from .code import ClassGenerator, ClassRenderer, InvalidIdentifierError
from .config import SoapGenConfig
from .context import ClientContext, ClientFactoryContext, ClientMethodContext, Context, PropertyContext, TypeContext
from .factory import ClientFactoryGenerator
from .logging import get_logger
from .models import Client, Metadata, Type


@dataclass
class GeneratedClass:
    """One rendered class and where it belongs on disk."""

    fqcn: str
    path: Path
    source: str


@dataclass
class GenerationFailure:
    fqcn: str
    error: AssemblerError


@dataclass
class GenerationReport:
    """Outcome of a generation run."""

    generated: List[GeneratedClass] = field(default_factory=list)
    failures: List[GenerationFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


class Orchestrator:
    """Builds one class model per type (or for the client) and renders it.

    A failing assembler aborts only the class it was working on; the error is
    logged and recorded in the report, and generation moves on.
    """

    def __init__(
        self,
        config: SoapGenConfig,
        *,
        renderer: ClassRenderer | None = None,
        type_assemblers: Optional[Sequence[Assembler]] = None,
        client_assemblers: Optional[Sequence[Assembler]] = None,
        factory_generator: ClientFactoryGenerator | None = None,
    ) -> None:
        self.config = config
        self.renderer = renderer or ClassRenderer(config.templates_dir)
        self._type_overrides = list(type_assemblers) if type_assemblers is not None else None
        self._client_overrides = list(client_assemblers) if client_assemblers is not None else None
        self.factory_generator = factory_generator or ClientFactoryGenerator(self.renderer)
        self.logger = get_logger("orchestrator")

    def assemble_type(self, type_: Type) -> ClassGenerator:
        """Return the class model for ``type_``; raises ``AssemblerError``."""
        try:
            class_ = ClassGenerator(type_.name, type_.namespace or None)
        except InvalidIdentifierError as exc:
            raise AssemblerError(f"Failed to assemble type {type_.fqcn}: {exc}") from exc
        contexts: List[Context] = [TypeContext(class_, type_)]
        contexts.extend(PropertyContext(class_, type_, prop) for prop in type_.properties)
        self._run(self._assemblers_for_type(type_), contexts)
        return class_

    def assemble_client(self, metadata: Metadata) -> ClassGenerator:
        """Return the client class model; raises ``AssemblerError``."""
        client = Client(self.config.client.name, self.config.client.namespace, metadata.methods)
        class_ = ClassGenerator(client.name, client.namespace or None)
        contexts: List[Context] = [ClientContext(class_, client.name, client.namespace)]
        contexts.extend(ClientMethodContext(class_, method) for method in client.methods)
        self._run(self._client_assemblers(), contexts)
        return class_

    def generate_types(self, metadata: Metadata, *, dry_run: bool = False) -> GenerationReport:
        destination = self.config.types.destination or self.config.root
        report = GenerationReport()
        self.logger.debug("Generating %d types into %s", len(metadata.types), destination)
        for type_ in metadata.types:
            try:
                class_ = self.assemble_type(type_)
            except AssemblerError as exc:
                self._record_failure(report, type_.fqcn, exc)
                continue
            self._emit(report, class_, destination, dry_run=dry_run)
        return report

    def generate_client(self, metadata: Metadata, *, dry_run: bool = False) -> GenerationReport:
        destination = self.config.client.destination or self.config.root
        report = GenerationReport()
        try:
            class_ = self.assemble_client(metadata)
        except AssemblerError as exc:
            client = Client(self.config.client.name, self.config.client.namespace)
            self._record_failure(report, client.fqcn, exc)
            return report
        self._emit(report, class_, destination, dry_run=dry_run)
        return report

    def generate_client_factory(self, *, dry_run: bool = False) -> GenerationReport:
        context = ClientFactoryContext(
            client_name=self.config.client.name,
            client_namespace=self.config.client.namespace,
            classmap_name=self.config.classmap.name,
            classmap_namespace=self.config.classmap_namespace,
        )
        destination = self.config.client.destination or self.config.root
        report = GenerationReport()
        self._emit(report, self.factory_generator.build(context), destination, dry_run=dry_run)
        return report

    def _assemblers_for_type(self, type_: Type) -> List[Assembler]:
        if self._type_overrides is not None:
            return self._type_overrides
        return discover_assemblers(self.config.types.assemblers_for(type_.name), config=self.config)

    def _client_assemblers(self) -> List[Assembler]:
        if self._client_overrides is not None:
            return self._client_overrides
        return discover_assemblers(self.config.client.assemblers, config=self.config)

    def _run(self, assemblers: Iterable[Assembler], contexts: Sequence[Context]) -> None:
        assemblers = list(assemblers)
        for context in contexts:
            for assembler in assemblers:
                if assembler.can_assemble(context):
                    assembler.assemble(context)

    def _emit(
        self,
        report: GenerationReport,
        class_: ClassGenerator,
        destination: Path,
        *,
        dry_run: bool,
    ) -> None:
        path = destination / f"{class_.name}.php"
        source = self.renderer.render_file(class_)
        if dry_run:
            self.logger.info("Would write %s to %s", class_.fqcn, path)
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(source, encoding="utf-8")
            self.logger.info("Generated %s at %s", class_.fqcn, path)
        report.generated.append(GeneratedClass(fqcn=class_.fqcn, path=path, source=source))

    def _record_failure(self, report: GenerationReport, fqcn: str, exc: AssemblerError) -> None:
        self.logger.error("Skipping %s: %s", fqcn, exc)
        report.failures.append(GenerationFailure(fqcn=fqcn, error=exc))


__all__ = ["GeneratedClass", "GenerationFailure", "GenerationReport", "Orchestrator"]
