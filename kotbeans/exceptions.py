"""
KotBeans Exceptions

Custom exception hierarchy for the KotBeans definition reader
"""


class KotBeansError(Exception):
    """
    Base exception for all KotBeans errors.

    All KotBeans-specific exceptions inherit from this class.
    You can catch this to handle any definition-loading error generically.

    Example:
        >>> try:
        ...     reader.parse_file("beans.xml")
        ... except KotBeansError as e:
        ...     print(f"Bean definition error: {e}")
    """

    pass


class SchemaViolationError(KotBeansError):
    """
    Raised when a bean document does not follow the bean schema.

    This error occurs while the document structure itself is being
    validated, before any individual bean is looked at in detail.

    Common causes:
        - Root element without ``xmlnamespace="schema/beans"``
        - Root namespace marker pointing at another schema
        - A document with no ``<bean>`` or ``<package-scan>`` children
        - An unknown child tag such as ``<beam>`` under the root
        - A child other than ``<property>`` inside a ``<bean>``
        - Malformed XML passed to ``parse_string()`` or ``parse_file()``

    Solution:
        Declare the schema on the root and only use known tags::

            <beans xmlnamespace="schema/beans">
                <bean id="database" class="app.db.Database"/>
                <package-scan package_name="app.services"/>
            </beans>
    """

    pass


class MissingAttributeError(KotBeansError):
    """
    Raised when a required attribute is absent from a document node.

    Required attributes:
        - ``<bean>``: ``id`` and ``class``
        - ``<property>``: ``name``
        - ``<package-scan>``: ``package_name``

    Also raised when a BeanDefinition is built with a blank name.

    Solution:
        Add the missing attribute::

            <bean id="userRepository" class="app.repo.UserRepository">
                <property name="table" value="users"/>
            </bean>
    """

    pass


class ConflictingPropertyError(KotBeansError):
    """
    Raised when a ``<property>`` node sets both or neither of value/ref.

    A property is either a literal (``value``) that is coerced to the
    field type, or a reference (``ref``) to another bean. It can never be
    both, and it must be one of them.

    Common causes:
        - ``<property name="db" value="x" ref="dataSource"/>``
        - ``<property name="db"/>``
        - ``<property name="db" value="  "/>`` (blank values do not count)

    Solution:
        Keep exactly one of the two attributes::

            <property name="timeout" value="30"/>
            <property name="db" ref="dataSource"/>
    """

    pass


class ClassResolutionError(KotBeansError):
    """
    Raised when a class named by a document or a scan cannot be resolved.

    Common causes:
        - Typo in the ``class`` attribute of a ``<bean>``
        - The module is not importable (not installed, not on ``sys.path``)
        - The dotted path points at something that is not a class
        - A ``<package-scan>`` naming a package that does not exist
        - An ``autowired()`` field with no explicit name and no type hint

    Solution:
        Use the fully qualified class path::

            <bean id="service" class="app.services.UserService"/>

        and give autowired fields a type hint or an explicit bean name::

            repository: UserRepository = autowired()
            cache = autowired("redisCache")
    """

    pass


class PropertyInstantiationError(KotBeansError):
    """
    Raised when a literal property value cannot be coerced to its field type.

    The target type is taken from the bean class's type hints. The
    message names the bean and the property that failed; the original
    exception is chained as ``__cause__``.

    Common causes:
        - ``<property name="timeout" value="thirty"/>`` for ``timeout: int``
        - A property name with no matching type hint on the bean class
        - ``qualifier("maybe")`` on a ``bool`` field

    Solution:
        Declare the field with a type hint and use a literal it accepts::

            class Service:
                timeout: int
                debug: bool

            <property name="timeout" value="30"/>
            <property name="debug" value="true"/>
    """

    pass


class DefinitionNotFoundError(KotBeansError):
    """
    Raised when a bean name is not present in the registry.

    This error occurs when calling ``registry.get(name)`` for a name that
    no parse pass has registered. Use ``get_or_null()`` when a missing
    definition is an expected outcome.

    Note:
        The error message includes a list of registered bean names
        to help spot typos.
    """

    pass
