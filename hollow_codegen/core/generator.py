"""
Base generator interface for all code generation targets.

Defines the contract that every per-schema generator implements, the
artifact it hands back, and the batch helper that runs a generator over
many schemas.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Any, Dict, List, Optional, Type

from ..logging_config import get_logger
from .config import GeneratorConfig
from .schema import ObjectSchema, check_schemas
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


@dataclass(frozen=True)
class GeneratedArtifact:
    """Class name and source text produced for one schema."""

    class_name: str
    source_text: str
    package_name: str = ""
    file_extension: str = ".java"

    @property
    def file_name(self) -> str:
        return f"{self.class_name}{self.file_extension}"

    @property
    def relative_path(self) -> PurePosixPath:
        """Path below a source root, following the package layout."""
        parts = [p for p in self.package_name.split(".") if p]
        return PurePosixPath(*parts, self.file_name)


class CodeGenerator(ABC):
    """Abstract base class for generators that turn one schema into one file."""

    def __init__(self, schema: ObjectSchema, config: Optional[GeneratorConfig] = None):
        """Initialize generator with a schema and optional configuration."""
        self.schema = schema
        self.config = config or GeneratorConfig()
        self._template_engine = None

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'java')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.java')."""
        pass

    @property
    @abstractmethod
    def class_name(self) -> str:
        """Return the name of the generated type."""
        pass

    @abstractmethod
    def generate(self) -> str:
        """
        Generate source text for the schema.

        Returns:
            Generated code as a string
        """
        pass

    def create_template_engine(self) -> TemplateEngine:
        """
        Build the template engine for this generator.

        Subclasses override this to supply their templates.
        """
        return create_template_engine()

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._template_engine = self.create_template_engine()
        return self._template_engine

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Args:
            template_name: Template name
            context: Template variables

        Returns:
            Rendered content
        """
        return self.template_engine.render_template(template_name, context)

    def generate_artifact(self) -> GeneratedArtifact:
        """Generate the source text and wrap it with its class name."""
        return GeneratedArtifact(
            class_name=self.class_name,
            source_text=self.generate(),
            package_name=self.config.package_name,
            file_extension=self.file_extension,
        )


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        artifacts: List[GeneratedArtifact] = None,
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            artifacts: Generated artifacts, one per schema
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.artifacts = artifacts or []
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls()
        result.success = False
        result.error_message = message
        result.exception = exception
        return result

    def get_artifact(self, class_name: str) -> Optional[GeneratedArtifact]:
        for artifact in self.artifacts:
            if artifact.class_name == class_name:
                return artifact
        return None


def generate_code(
    generator_class: Type[CodeGenerator],
    schemas: Dict[str, ObjectSchema],
    config: Optional[GeneratorConfig] = None,
) -> GenerationResult:
    """
    Generate one artifact per schema with error handling.

    Schemas are processed in name order so the result does not depend on
    how the input mapping was built.

    Args:
        generator_class: Generator class to instantiate per schema
        schemas: Schemas to generate code for
        config: Generator configuration

    Returns:
        GenerationResult with artifacts, warnings, and metadata
    """
    config = config or GeneratorConfig()

    try:
        warnings = check_schemas(schemas)

        artifacts = []
        language = None
        extension = None
        for name in sorted(schemas):
            generator = generator_class(schemas[name], config)
            artifacts.append(generator.generate_artifact())
            language = generator.language_name
            extension = generator.file_extension

        metadata = {
            "language": language,
            "file_extension": extension,
            "schema_count": len(schemas),
            "class_names": [a.class_name for a in artifacts],
            "package_name": config.package_name,
        }

        logger.info("Generated %d class(es)", len(artifacts))
        return GenerationResult(artifacts, warnings, metadata)

    except Exception as e:
        logger.exception("Code generation failed")
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
