"""A pool of reusable particles."""

from __future__ import annotations

from typing import Any, Iterator, Protocol

__all__ = ["Particle", "ParticleUpdater", "ParticleRenderer", "ParticlePool"]


class Particle(Protocol):
    def is_active(self) -> bool: ...


class ParticleUpdater(Protocol):
    def update(self, particle: Any, game_time: Any) -> None: ...


class ParticleRenderer(Protocol):
    def draw(self, particle: Any, sprite_batch: Any) -> None: ...


class ParticlePool:
    """Keeps particles and runs an updater and a renderer over the active ones."""

    def __init__(self, updater: ParticleUpdater, renderer: ParticleRenderer) -> None:
        self._particles: list[Particle] = []
        self.updater = updater
        self.renderer = renderer

    def _active(self) -> Iterator[Particle]:
        return (particle for particle in self._particles if particle.is_active())

    def update(self, game_time: Any) -> None:
        """Update every active particle."""
        for particle in self._active():
            self.updater.update(particle, game_time)

    def draw(self, sprite_batch: Any) -> None:
        """Draw every active particle."""
        for particle in self._active():
            self.renderer.draw(particle, sprite_batch)

    def inactive_particle(self) -> Particle | None:
        """The first particle that is free for reuse, or None."""
        return next((p for p in self._particles if not p.is_active()), None)

    def add_particle(self, particle: Particle) -> None:
        """Add a particle to the pool."""
        self._particles.append(particle)

    def __len__(self) -> int:
        return len(self._particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self._particles)