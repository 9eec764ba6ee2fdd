"""
Construction of catalog distributions by name.

A Catalog owns the uniform source of a program and builds any of the
catalog distributions from its name and parameters:

    >>> from dist_lib.distribution import Catalog, UniformSource
    >>> catalog = Catalog(UniformSource(seed=42))
    >>> coin = catalog.create("bernoulli", p=0.3)
    >>> catalog.list_distributions()[:3]
    ['bayes_rejection', 'bernoulli', 'binomial']
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from dist_lib.distribution import catalog
from dist_lib.distribution.base import Distribution
from dist_lib.distribution.source import UniformSource
from dist_lib.logging import get_logger


@dataclass(frozen=True)
class CatalogEntry:
    """
    Metadata about a registered distribution.

    Attributes:
        name: Canonical (lowercase) name
        constructor: Function building the distribution; the source is
            passed as first argument, the parameters as keywords
        required_params: Parameter names that must be provided
        description: Human-readable description
    """
    name: str
    constructor: Callable[..., Distribution]
    required_params: Tuple[str, ...] = ()
    description: str = ""


class Catalog:
    """
    Named constructors for distributions sharing one uniform source.
    """

    def __init__(self, source: Optional[UniformSource] = None):
        """
        Initialize with the built-in distributions.

        Args:
            source: Uniform source handed to every constructor; a new
                unseeded one is created if not given
        """
        self.source = source if source is not None else UniformSource()
        self._entries: Dict[str, CatalogEntry] = {}
        self._register_builtins()

    def _register_builtins(self) -> None:
        self.register("unit_uniform", catalog.unit_uniform,
                      description="Uniform over [0, 1)")
        self.register("uniform", catalog.uniform, ("a", "b"),
                      "Uniform over [a, b)")
        self.register("point_uniform", catalog.point_uniform,
                      description="Unit uniform with draws below 0.5 collapsed to 0")
        self.register("bernoulli", catalog.bernoulli, ("p",),
                      "True with probability p")
        self.register("binomial", catalog.binomial, ("p", "n"),
                      "Successes in n Bernoulli(p) tosses")
        self.register("geometric", catalog.geometric, ("p",),
                      "Bernoulli(p) successes before the first failure")
        self.register("normal_exponential", catalog.normal_exponential,
                      description="Exponential with rate 1")
        self.register("gaussian_box_mueller", catalog.gaussian_box_mueller, ("mean", "variance"),
                      "Gaussian by the Box-Mueller transform")
        self.register("gaussian_central", catalog.gaussian_central, ("mean", "variance"),
                      "Gaussian by the central limit theorem")
        self.register("gaussian_rejection", catalog.gaussian_rejection, ("mean", "variance"),
                      "Gaussian by rejection from the exponential")
        self.register("bayes_rejection", catalog.bayes_rejection, ("density", "envelope", "proposal"),
                      "Acceptance-rejection over a proposal")

    def register(
        self,
        name: str,
        constructor: Callable[..., Distribution],
        required_params: Tuple[str, ...] = (),
        description: str = ""
    ) -> None:
        """
        Register a distribution constructor, replacing any entry of that name.

        Args:
            name: Name of the distribution (case-insensitive)
            constructor: Function taking the source then keyword parameters
            required_params: Parameter names that must be provided
            description: Human-readable description
        """
        key = name.lower()
        self._entries[key] = CatalogEntry(key, constructor, tuple(required_params), description)

    def get(self, name: str) -> CatalogEntry:
        """
        Return the entry registered under a name.

        Raises:
            ValueError: If no distribution has that name
        """
        key = name.lower()
        if key not in self._entries:
            raise ValueError(
                f"Unknown distribution '{name}'. "
                f"Available: {', '.join(self.list_distributions())}"
            )
        return self._entries[key]

    def list_distributions(self) -> List[str]:
        """Return the registered names, sorted."""
        return sorted(self._entries)

    def create(self, name: str, **params) -> Distribution:
        """
        Build a distribution on this catalog's source.

        Only the presence of the required parameters is checked, not
        their values.

        Args:
            name: Name of the distribution
            **params: Parameters of the distribution

        Returns:
            The new distribution

        Raises:
            ValueError: If the name is unknown or a required parameter is missing
        """
        entry = self.get(name)
        missing = [p for p in entry.required_params if p not in params]
        if missing:
            raise ValueError(
                f"Distribution '{entry.name}' requires parameters: {', '.join(missing)}"
            )

        get_logger().debug({
            "event": "distribution_created",
            "name": entry.name,
            "params": params
        })
        return entry.constructor(self.source, **params)

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._entries
