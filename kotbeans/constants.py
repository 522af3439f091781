"""
Constants

Tag names, attribute names and marker attributes shared by the readers.
"""

# Root namespace marker
NAMESPACE_ATTRIBUTE = "xmlnamespace"
BEANS_SCHEMA = "schema/beans"

# Document tags
BEAN_ELEMENT = "bean"
PACKAGE_SCAN_ELEMENT = "package-scan"
PROPERTY_ELEMENT = "property"

# Document attributes
ID_ATTRIBUTE = "id"
CLASS_ATTRIBUTE = "class"
SCOPE_ATTRIBUTE = "scope"
NAME_ATTRIBUTE = "name"
VALUE_ATTRIBUTE = "value"
REF_ATTRIBUTE = "ref"
PACKAGE_NAME_ATTRIBUTE = "package_name"

# Attributes stamped onto marked classes
COMPONENT_MARKER = "__kotbeans_component__"
SCOPE_MARKER = "__kotbeans_scope__"
