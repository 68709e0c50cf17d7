from .base import BasePass

class PassRegistry:
    """
    Registry for static-node pass classes.
    """

    _passes: dict[str, type[BasePass]] = {}

    @classmethod
    def register(cls, pass_class: type[BasePass]) -> None:
        """
        Register a pass class under its name.

        Args:
            pass_class: the pass class to register.
        """

        if not pass_class.name:
            raise ValueError(f"Pass class {pass_class.__name__} has no name.")
        cls._passes[pass_class.name] = pass_class

    @classmethod
    def get_pass_class(cls, name: str) -> type[BasePass]:
        """
        Get the class of a pass by its name.

        Args:
            name: the name of the pass.

        Returns:
            The class of the pass.

        Raises:
            KeyError: If the pass is not registered.
        """

        if name not in cls._passes:
            raise KeyError(f"Unknown pass: {name}. Available passes: {list(cls._passes.keys())}")

        return cls._passes[name]

    @classmethod
    def build_pipeline(cls, pass_names: list[str]) -> list[BasePass]:
        """
        Instantiate passes in the given order, checking that every pass runs after the listed passes it requires.

        Args:
            pass_names: the ordered names of the passes.

        Returns:
            The instantiated passes, in order.

        Raises:
            ValueError: If a pass is listed twice or before one of its required passes.
        """

        passes = []
        seen: set[str] = set()
        for name in pass_names:
            if name in seen:
                raise ValueError(f"Pass '{name}' is listed more than once.")
            pass_class = cls.get_pass_class(name)
            # Leaving a required pass out is allowed, running it later is not
            missing = [required for required in pass_class.requires if required in pass_names and required not in seen]
            if missing:
                raise ValueError(f"Pass '{name}' must run after {missing}, got order {pass_names}.")
            seen.add(name)
            passes.append(pass_class())

        return passes

# Decorators
def register_pass(pass_class: type[BasePass]) -> type[BasePass]:
    """
    Decorator to register a static-node pass.
    """

    PassRegistry.register(pass_class)
    return pass_class
