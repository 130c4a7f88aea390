"""Shared fixtures for the hollow_codegen test suite."""

import json
import logging

import pytest

from hollow_codegen.core.config import GeneratorConfig
from hollow_codegen.core.schema import FieldType, ObjectField, ObjectSchema
from hollow_codegen.logging_config import LOGGER_NAME


@pytest.fixture
def movie_schema():
    """Movie{ id: INT, title: STRING, director: REFERENCE -> Person }."""
    return ObjectSchema(
        name="Movie",
        fields=(
            ObjectField("id", FieldType.INT),
            ObjectField("title", FieldType.STRING),
            ObjectField("director", FieldType.REFERENCE, "Person"),
        ),
    )


@pytest.fixture
def person_schema():
    return ObjectSchema(
        name="Person",
        fields=(
            ObjectField("name", FieldType.STRING),
            ObjectField("age", FieldType.INT),
        ),
    )


@pytest.fixture
def all_types_schema():
    """One field of every field type, in enum order."""
    return ObjectSchema(
        name="Everything",
        fields=(
            ObjectField("flag", FieldType.BOOLEAN),
            ObjectField("count", FieldType.INT),
            ObjectField("total", FieldType.LONG),
            ObjectField("ratio", FieldType.FLOAT),
            ObjectField("score", FieldType.DOUBLE),
            ObjectField("payload", FieldType.BYTES),
            ObjectField("label", FieldType.STRING),
            ObjectField("owner", FieldType.REFERENCE, "Person"),
        ),
    )


@pytest.fixture
def default_config():
    return GeneratorConfig()


@pytest.fixture
def movie_config():
    return GeneratorConfig(package_name="com.example.movies", api_class_name="MovieAPI")


@pytest.fixture
def movie_document():
    """Schema document for Movie and Person as the loader reads it."""
    return {
        "schemas": [
            {
                "name": "Movie",
                "fields": [
                    {"name": "id", "type": "INT"},
                    {"name": "title", "type": "STRING"},
                    {"name": "director", "type": "REFERENCE", "referencedType": "Person"},
                ],
            },
            {
                "name": "Person",
                "fields": [
                    {"name": "name", "type": "string"},
                    {"name": "age", "type": "int"},
                ],
            },
        ]
    }


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document under tmp_path and return its path."""

    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers and propagation changes made by setup_logging."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
