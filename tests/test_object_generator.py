"""Tests for the Java object accessor generator."""

import logging
import re
from concurrent.futures import ThreadPoolExecutor

import pytest

from hollow_codegen.core.config import GeneratorConfig
from hollow_codegen.core.generator import GeneratedArtifact
from hollow_codegen.core.schema import FieldType, ObjectField, ObjectSchema
from hollow_codegen.languages.java import (
    FIELD_ACCESSOR_TEMPLATES,
    ObjectJavaGenerator,
    create_object_generator,
    generate,
)

EXPECTED_MOVIE_SOURCE = """\
package com.example.movies;

import com.netflix.hollow.api.objects.HollowObject;
import com.netflix.hollow.core.schema.HollowObjectSchema;

@SuppressWarnings("all")
public class MovieHollowImpl extends HollowObject {

    public MovieHollowImpl(MovieDelegate delegate, int ordinal) {
        super(delegate, ordinal);
    }

    public int getId() {
        return delegate().getId(ordinal);
    }

    public Integer getIdBoxed() {
        return delegate().getIdBoxed(ordinal);
    }

    public String getTitle() {
        return delegate().getTitle(ordinal);
    }

    public boolean isTitleEqual(String testValue) {
        return delegate().isTitleEqual(ordinal, testValue);
    }

    public PersonHollowImpl getDirector() {
        int refOrdinal = delegate().getDirectorOrdinal(ordinal);
        if(refOrdinal == -1)
            return null;
        return api().getPersonHollowImpl(refOrdinal);
    }

    public MovieAPI api() {
        return typeApi().getAPI();
    }

    public MovieTypeAPI typeApi() {
        return delegate().getTypeAPI();
    }

    protected MovieDelegate delegate() {
        return (MovieDelegate)delegate;
    }

}
"""

METHOD_DECL = re.compile(r"^    (?:public|protected) (?:<T> )?\S+ (\w+)\(", re.MULTILINE)


def _methods(source):
    """Declared method names in source order, constructor excluded."""
    return [m for m in METHOD_DECL.findall(source)]


def _method_body(source, method_name):
    start = source.index(f" {method_name}(")
    end = source.index("\n    }", start)
    return source[start:end]


class TestMovieExample:
    def test_exact_source(self, movie_schema, movie_config):
        artifact = generate(movie_schema, movie_config)

        assert artifact.class_name == "MovieHollowImpl"
        assert artifact.source_text == EXPECTED_MOVIE_SOURCE

    def test_artifact_metadata(self, movie_schema, movie_config):
        artifact = generate(movie_schema, movie_config)

        assert isinstance(artifact, GeneratedArtifact)
        assert artifact.file_name == "MovieHollowImpl.java"
        assert str(artifact.relative_path) == "com/example/movies/MovieHollowImpl.java"

    def test_default_config(self, movie_schema):
        artifact = generate(movie_schema)
        assert artifact.source_text.startswith("package com.example.api;\n")
        assert "public GeneratedAPI api() {" in artifact.source_text


class TestDeterminism:
    def test_repeated_calls_identical(self, all_types_schema, movie_config):
        first = generate(all_types_schema, movie_config)
        second = generate(all_types_schema, movie_config)
        assert first == second

    def test_equal_inputs_identical(self, movie_config):
        def build():
            return ObjectSchema(
                "Movie",
                [ObjectField("id", FieldType.INT), ObjectField("p", FieldType.REFERENCE, "P")],
            )

        config_a = movie_config.with_overrides(parameterized_types=["P", "Q"])
        config_b = movie_config.with_overrides(parameterized_types=["Q", "P"])
        assert generate(build(), config_a) == generate(build(), config_b)

    def test_parallel_calls(self, all_types_schema, movie_schema, movie_config):
        expected = {
            "Everything": generate(all_types_schema, movie_config).source_text,
            "Movie": generate(movie_schema, movie_config).source_text,
        }
        jobs = [all_types_schema, movie_schema] * 20

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda s: generate(s, movie_config), jobs))

        for schema, artifact in zip(jobs, results):
            assert artifact.source_text == expected[schema.name]


class TestFieldCoverage:
    def test_every_field_type_has_a_template(self):
        assert set(FIELD_ACCESSOR_TEMPLATES) == set(FieldType)

    def test_accessor_set_in_field_order(self, all_types_schema, default_config):
        source = generate(all_types_schema, default_config).source_text

        assert _methods(source) == [
            "getFlag",
            "getFlagBoxed",
            "getCount",
            "getCountBoxed",
            "getTotal",
            "getTotalBoxed",
            "getRatio",
            "getRatioBoxed",
            "getScore",
            "getScoreBoxed",
            "getPayload",
            "getLabel",
            "isLabelEqual",
            "getOwner",
            "api",
            "typeApi",
            "delegate",
        ]

    def test_field_order_follows_schema(self, default_config):
        schema = ObjectSchema(
            "Ordered",
            (
                ObjectField("zeta", FieldType.STRING),
                ObjectField("alpha", FieldType.BYTES),
            ),
        )
        source = generate(schema, default_config).source_text
        assert source.index("getZeta()") < source.index("getAlpha()")

    @pytest.mark.parametrize(
        "field_type, primitive, boxed",
        [
            (FieldType.BOOLEAN, "boolean", "Boolean"),
            (FieldType.INT, "int", "Integer"),
            (FieldType.LONG, "long", "Long"),
            (FieldType.FLOAT, "float", "Float"),
            (FieldType.DOUBLE, "double", "Double"),
        ],
    )
    def test_primitive_and_boxed(self, field_type, primitive, boxed, default_config):
        schema = ObjectSchema("Rec", (ObjectField("value", field_type),))
        source = generate(schema, default_config).source_text

        assert f"    public {primitive} getValue() {{\n" in source
        assert "        return delegate().getValue(ordinal);\n" in source
        assert f"    public {boxed} getValueBoxed() {{\n" in source
        assert "        return delegate().getValueBoxed(ordinal);\n" in source
        assert "isValueEqual" not in source

    def test_bytes_has_single_accessor(self, default_config):
        schema = ObjectSchema("Rec", (ObjectField("blob", FieldType.BYTES),))
        source = generate(schema, default_config).source_text

        assert "    public byte[] getBlob() {\n" in source
        assert "getBlobBoxed" not in source
        assert "isBlobEqual" not in source

    def test_string_has_getter_and_equality(self, default_config):
        schema = ObjectSchema("Rec", (ObjectField("name", FieldType.STRING),))
        source = generate(schema, default_config).source_text

        assert "    public String getName() {\n" in source
        assert "    public boolean isNameEqual(String testValue) {\n" in source
        assert "        return delegate().isNameEqual(ordinal, testValue);\n" in source
        assert "getNameBoxed" not in source

    def test_empty_schema(self, default_config):
        source = generate(ObjectSchema("Empty"), default_config).source_text
        assert _methods(source) == ["api", "typeApi", "delegate"]
        assert "    }\n\n    public GeneratedAPI api() {" in source


class TestReferenceAccessor:
    def test_null_sentinel_checked_before_lookup(self, movie_schema, default_config):
        source = generate(movie_schema, default_config).source_text
        body = _method_body(source, "getDirector")

        sentinel = body.index("if(refOrdinal == -1)\n            return null;")
        lookup = body.index("api().getPersonHollowImpl(refOrdinal)")
        assert body.index("delegate().getDirectorOrdinal(ordinal)") < sentinel < lookup

    def test_parameterized_types_switch(self, default_config):
        schema = ObjectSchema(
            "Holder",
            (
                ObjectField("foo", FieldType.REFERENCE, "Foo"),
                ObjectField("bar", FieldType.REFERENCE, "Bar"),
            ),
        )
        config = default_config.with_overrides(parameterized_types={"Foo"})
        source = generate(schema, config).source_text

        assert "    public <T> T getFoo() {\n" in source
        assert "        return (T) api().getFooHollowImpl(refOrdinal);\n" in source
        assert "    public BarHollowImpl getBar() {\n" in source
        assert "        return api().getBarHollowImpl(refOrdinal);\n" in source

    def test_parameterize_all_class_names(self, movie_schema, default_config):
        config = default_config.with_overrides(parameterize_class_names=True)
        source = generate(movie_schema, config).source_text

        assert "    public <T> T getDirector() {\n" in source
        assert "PersonHollowImpl getDirector" not in source

    def test_postfix_applies_to_referenced_class(self, movie_schema):
        config = GeneratorConfig(class_postfix="V2")
        source = generate(movie_schema, config).source_text

        assert "    public PersonHollowImplV2 getDirector() {\n" in source
        assert "api().getPersonHollowImplV2(refOrdinal)" in source


class TestNamingOptions:
    def test_getter_prefix_on_accessors_only(self, movie_schema):
        config = GeneratorConfig(getter_prefix="_")
        source = generate(movie_schema, config).source_text

        assert "public int _getId() {" in source
        assert "public Integer _getIdBoxed() {" in source
        assert "public boolean _isTitleEqual(String testValue) {" in source
        assert "public PersonHollowImpl _getDirector() {" in source
        assert "return delegate().getId(ordinal);" in source
        assert "_api()" not in source

    def test_class_postfix_on_every_generated_type(self, movie_schema):
        artifact = generate(movie_schema, GeneratorConfig(class_postfix="V2"))
        source = artifact.source_text

        assert artifact.class_name == "MovieHollowImplV2"
        assert "public class MovieHollowImplV2 extends HollowObject {" in source
        assert "public MovieHollowImplV2(MovieDelegateV2 delegate, int ordinal) {" in source
        assert "public MovieTypeAPIV2 typeApi() {" in source
        assert "return (MovieDelegateV2)delegate;" in source

    def test_invalid_field_characters_sanitized(self, default_config):
        schema = ObjectSchema(
            "Rec",
            (
                ObjectField("release-year", FieldType.INT),
                ObjectField("display name", FieldType.STRING),
            ),
        )
        source = generate(schema, default_config).source_text

        assert "getRelease_year()" in source
        assert "getRelease_yearBoxed()" in source
        assert "isDisplay_nameEqual(String testValue)" in source
        assert "release-year" not in source
        assert "display name" not in source
        for name in _methods(source):
            assert name.isidentifier()


class TestUnknownFieldType:
    def test_unmapped_type_is_skipped(self, default_config, caplog):
        schema = ObjectSchema(
            "Rec",
            (
                ObjectField("id", FieldType.INT),
                ObjectField("tags", "MAP"),
                ObjectField("name", FieldType.STRING),
            ),
        )

        with caplog.at_level(logging.WARNING, logger="hollow_codegen"):
            source = generate(schema, default_config).source_text

        assert "Tags" not in source
        assert _methods(source)[:4] == ["getId", "getIdBoxed", "getName", "isNameEqual"]
        assert "Skipping Rec.tags" in caplog.text

    def test_unhashable_type_is_skipped(self, default_config):
        schema = ObjectSchema(
            "Rec",
            (ObjectField("tags", ["MAP"]), ObjectField("id", FieldType.INT)),
        )
        source = generate(schema, default_config).source_text
        assert _methods(source)[:2] == ["getId", "getIdBoxed"]


class TestGeneratorClass:
    def test_properties(self, movie_schema, movie_config):
        generator = ObjectJavaGenerator(movie_schema, movie_config)
        assert generator.language_name == "java"
        assert generator.file_extension == ".java"
        assert generator.class_name == "MovieHollowImpl"
        assert generator.generate() == EXPECTED_MOVIE_SOURCE

    def test_factory_overrides(self, movie_schema, movie_config):
        generator = create_object_generator(movie_schema, movie_config, getter_prefix="x")
        assert generator.config.getter_prefix == "x"
        assert generator.config.package_name == "com.example.movies"

    def test_reference_without_target_still_renders(self, default_config):
        schema = ObjectSchema("Rec", (ObjectField("ref", FieldType.REFERENCE),))
        source = generate(schema, default_config).source_text
        assert "    public _HollowImpl getRef() {\n" in source
