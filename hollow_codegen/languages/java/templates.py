"""
Built-in Jinja2 templates for Java object accessor classes.

Accessor templates render without a trailing newline; the class
template puts a blank line after each of them.
"""

HOLLOW_OBJECT_IMPORT = "com.netflix.hollow.api.objects.HollowObject"
HOLLOW_OBJECT_SCHEMA_IMPORT = "com.netflix.hollow.core.schema.HollowObjectSchema"


OBJECT_CLASS_TEMPLATE = """\
package {{ package_name }};

import {{ base_import }};
import {{ schema_import }};

@SuppressWarnings("all")
public class {{ class_name }} extends HollowObject {

    public {{ class_name }}({{ delegate_name }} delegate, int ordinal) {
        super(delegate, ordinal);
    }

{% for accessor in accessors %}
{{ accessor }}

{% endfor %}
    public {{ api_class_name }} api() {
        return typeApi().getAPI();
    }

    public {{ type_api_name }} typeApi() {
        return delegate().getTypeAPI();
    }

    protected {{ delegate_name }} delegate() {
        return ({{ delegate_name }})delegate;
    }

}
"""

# Shared by BOOLEAN, INT, LONG, FLOAT and DOUBLE
PRIMITIVE_ACCESSORS_TEMPLATE = """\
    public {{ primitive_type }} {{ getter_prefix }}get{{ name }}() {
        return delegate().get{{ name }}(ordinal);
    }

    public {{ boxed_type }} {{ getter_prefix }}get{{ name }}Boxed() {
        return delegate().get{{ name }}Boxed(ordinal);
    }"""

BYTES_ACCESSOR_TEMPLATE = """\
    public byte[] {{ getter_prefix }}get{{ name }}() {
        return delegate().get{{ name }}(ordinal);
    }"""

STRING_ACCESSORS_TEMPLATE = """\
    public String {{ getter_prefix }}get{{ name }}() {
        return delegate().get{{ name }}(ordinal);
    }

    public boolean {{ getter_prefix }}is{{ name }}Equal(String testValue) {
        return delegate().is{{ name }}Equal(ordinal, testValue);
    }"""

REFERENCE_ACCESSOR_TEMPLATE = """\
    public {% if parameterize %}<T> T{% else %}{{ referenced_class }}{% endif %} {{ getter_prefix }}get{{ name }}() {
        int refOrdinal = delegate().get{{ name }}Ordinal(ordinal);
        if(refOrdinal == -1)
            return null;
        return {% if parameterize %}(T) {% endif %}api().get{{ referenced_class }}(refOrdinal);
    }"""


JAVA_TEMPLATES = {
    "object_class.java.j2": OBJECT_CLASS_TEMPLATE,
    "primitive_accessors.java.j2": PRIMITIVE_ACCESSORS_TEMPLATE,
    "bytes_accessor.java.j2": BYTES_ACCESSOR_TEMPLATE,
    "string_accessors.java.j2": STRING_ACCESSORS_TEMPLATE,
    "reference_accessor.java.j2": REFERENCE_ACCESSOR_TEMPLATE,
}
