"""Configuration classes for pathgraph components."""

from dataclasses import dataclass


@dataclass
class MarkovConfig:
    """Configuration for Markov chain validation."""

    # Allowed deviation of a vertex's outgoing probability mass from 1.0
    tolerance: float = 1e-6

    def is_stochastic(self, total: float) -> bool:
        """Return True if an outgoing weight sum counts as a distribution."""
        return abs(total - 1.0) <= self.tolerance


# Global configuration instance
MARKOV_CONFIG = MarkovConfig()
