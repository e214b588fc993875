import pytest
from scooter_rentals.business import Business


class ScriptedRng:
    """
    Stands in for numpy's RandomState, replaying queued draws in order.
    Once a queue runs dry it falls back to a fixed default.
    """

    def __init__(self, randoms=(), uniforms=(), randints=(),
                 default_random=0.99, default_uniform=0.0):
        self.randoms = list(randoms)
        self.uniforms = list(uniforms)
        self.randints = list(randints)
        self.default_random = default_random
        self.default_uniform = default_uniform

    def random(self):
        return self.randoms.pop(0) if self.randoms else self.default_random

    def uniform(self, low, high):
        val = self.uniforms.pop(0) if self.uniforms else self.default_uniform
        assert low <= val < high
        return val

    def randint(self, low, high=None):
        val = self.randints.pop(0) if self.randints else low
        if high is not None:
            assert low <= val < high
        return val


@pytest.fixture
def calm_rng():
    """No noise and no breakages."""
    return ScriptedRng()


@pytest.fixture
def business(calm_rng):
    return Business("New Scoots, Inc.", rng=calm_rng)


def snapshot(b: Business):
    return (b.name, b.cash, b.working_scooters, b.broken_scooters,
            b.scooter_parts, b.advertisements)
