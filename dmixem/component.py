from collections import namedtuple

from .errors import InvalidConfiguration


Component = namedtuple("Component", ["priori", "distribution"])
Component.__doc__ = "A mixture component: priori weight in [0, 1] and its distribution."
Component.priori.__doc__ = "Mixing proportion of the component."
Component.distribution.__doc__ = "The component's probability distribution."


def as_component(component):
    """Unpack a (priori, distribution) pair into a :class:`Component`, or raise :class:`InvalidConfiguration`."""
    try:
        priori, distribution = component
    except (TypeError, ValueError):
        raise InvalidConfiguration("Component %r is not a (priori, distribution) pair." % (component,))

    return Component(priori, distribution)
