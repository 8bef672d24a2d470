import numpy as np
import pytest

from gearsengine.particles import Particle, ParticleEmitter


def test_new_particles_start_at_origin_white():
    emitter = ParticleEmitter(4)
    assert len(emitter.particles) == 4
    for p in emitter.particles:
        assert np.allclose(p.position, 0.0)
        assert np.allclose(p.color, 1.0)
        assert p.lifetime == 5.0
        assert p.age == 3.0


def test_default_particle_is_white_and_still():
    p = Particle()
    assert np.allclose(p.color, 1.0)
    assert np.allclose(p.velocity, 0.0)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        ParticleEmitter(-1)


def test_set_color_propagates_to_particles():
    emitter = ParticleEmitter(3)
    emitter.color = (0.5, 0.25, 0.0, 1.0)
    assert np.allclose(emitter.color, (0.5, 0.25, 0.0, 1.0))
    for p in emitter.particles:
        assert np.allclose(p.color, (0.5, 0.25, 0.0, 1.0))


def test_bad_color_shape_rejected():
    emitter = ParticleEmitter(1)
    emitter.color = (0.2, 0.4, 0.6, 0.8)
    with pytest.raises(ValueError):
        emitter.color = (1.0, 1.0, 1.0)
    assert np.allclose(emitter.color, (0.2, 0.4, 0.6, 0.8))
    assert np.allclose(emitter.particles[0].color, (0.2, 0.4, 0.6, 0.8))


def test_update_with_no_forces_moves_by_velocity():
    emitter = ParticleEmitter(2)
    emitter.update(1.0)
    for p in emitter.particles:
        assert np.allclose(p.position, p.velocity * 1.0)
        assert p.age == 0.0
        assert p.lifetime == pytest.approx(4.0)


def test_expired_particle_respawns_at_origin():
    emitter = ParticleEmitter(1)
    emitter.lifetime = 100.0
    emitter.update(5.0)
    p = emitter.particles[0]
    assert np.allclose(p.position, 0.0)
    assert p.lifetime == 100.0


def test_delay_adds_direction_before_gravity_takes_over():
    delayed = ParticleEmitter(1)
    immediate = ParticleEmitter(1)
    for emitter, delay in ((delayed, 10.0), (immediate, 0.0)):
        emitter.lifetime = 100.0
        emitter.direction = np.array([1.0, 0.0, 0.0])
        emitter.delay = delay
        emitter.update(0.5)
    diff = delayed.particles[0].position - immediate.particles[0].position
    assert np.allclose(diff, delayed.direction * 0.5)


def test_wind_shifts_positions():
    still = ParticleEmitter(1)
    windy = ParticleEmitter(1)
    for emitter in (still, windy):
        emitter.lifetime = 100.0
    windy.wind = np.array([0.0, 0.0, 2.0])
    still.update(0.25)
    windy.update(0.25)
    diff = windy.particles[0].position - still.particles[0].position
    assert np.allclose(diff, windy.wind * 0.25)


def test_vertex_data_layout():
    emitter = ParticleEmitter(3)
    emitter.color = (0.1, 0.2, 0.3, 0.4)
    emitter.particles[1].position = np.array([1.0, 2.0, 3.0])
    data = emitter.vertex_data()
    assert data.shape == (3, 7)
    assert data.dtype == np.float32
    assert np.allclose(data[1, :3], (1.0, 2.0, 3.0))
    assert np.allclose(data[:, 3:], (0.1, 0.2, 0.3, 0.4))


def test_vertex_data_empty():
    assert ParticleEmitter(0).vertex_data().shape == (0, 7)