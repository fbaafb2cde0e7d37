from katana.particlepool import ParticlePool


class _Particle:
    def __init__(self, active):
        self.active = active

    def is_active(self):
        return self.active


class _Recorder:
    def __init__(self):
        self.calls = []

    def update(self, particle, game_time):
        self.calls.append((particle, game_time))

    def draw(self, particle, sprite_batch):
        self.calls.append((particle, sprite_batch))


def _pool(*flags):
    updater, renderer = _Recorder(), _Recorder()
    pool = ParticlePool(updater, renderer)
    particles = [_Particle(flag) for flag in flags]
    for particle in particles:
        pool.add_particle(particle)
    return pool, particles, updater, renderer


def test_update_visits_active_particles_only():
    pool, particles, updater, _ = _pool(True, False, True)
    pool.update("time")
    assert updater.calls == [(particles[0], "time"), (particles[2], "time")]


def test_draw_visits_active_particles_only():
    pool, particles, _, renderer = _pool(False, True)
    pool.draw("batch")
    assert renderer.calls == [(particles[1], "batch")]


def test_inactive_particle_is_first_free_one():
    pool, particles, _, _ = _pool(True, False, False)
    assert pool.inactive_particle() is particles[1]


def test_no_inactive_particle():
    pool, _, _, _ = _pool(True, True)
    assert pool.inactive_particle() is None


def test_empty_pool():
    pool, _, updater, _ = _pool()
    pool.update("time")
    assert updater.calls == []
    assert pool.inactive_particle() is None
    assert len(pool) == 0


def test_added_particles_are_kept_in_order():
    pool, particles, _, _ = _pool(True, False)
    assert list(pool) == particles
    assert len(pool) == 2