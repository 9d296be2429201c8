from beanwire.container import Container, ContainerState
from beanwire.container_context import ContainerContext, container_context
from beanwire.descriptors import Autowire, ComponentDescriptor, Dependency, Injection, Lifetime
from beanwire.exceptions import (
    BeanwireAmbiguousDependencyError,
    BeanwireCyclicDependencyError,
    BeanwireDuplicateNameError,
    BeanwireError,
    BeanwireInstantiationError,
    BeanwireMissingKeyError,
    BeanwireParseError,
    BeanwireRegistryFrozenError,
    BeanwireTypeResolutionError,
    BeanwireUnknownComponentError,
)
from beanwire.loaders import (
    ConfigLoader,
    PropertiesConfigLoader,
    XmlConfigLoader,
    YamlConfigLoader,
    load_config,
)
from beanwire.registry import Registry
from beanwire.resolver import Resolver
from beanwire.scanning import component, scan
from beanwire.settings import BeanwireSettings
from beanwire.type_resolution import TypeResolver

__all__ = [
    "Autowire",
    "BeanwireAmbiguousDependencyError",
    "BeanwireCyclicDependencyError",
    "BeanwireDuplicateNameError",
    "BeanwireError",
    "BeanwireInstantiationError",
    "BeanwireMissingKeyError",
    "BeanwireParseError",
    "BeanwireRegistryFrozenError",
    "BeanwireSettings",
    "BeanwireTypeResolutionError",
    "BeanwireUnknownComponentError",
    "ComponentDescriptor",
    "ConfigLoader",
    "Container",
    "ContainerContext",
    "ContainerState",
    "Dependency",
    "Injection",
    "Lifetime",
    "PropertiesConfigLoader",
    "Registry",
    "Resolver",
    "TypeResolver",
    "XmlConfigLoader",
    "YamlConfigLoader",
    "component",
    "container_context",
    "load_config",
    "scan",
]
