import pytest

from katana.audiosample import AudioSample
from katana.resource import ResourceLoadError


def test_defaults():
    sample = AudioSample()
    assert sample.volume == 1.0
    assert sample.looping is False
    assert sample.is_loaded is False


def test_set_volume_is_clamped():
    sample = AudioSample()
    sample.set_volume(0.5)
    assert sample.volume == 0.5
    sample.set_volume(3.0)
    assert sample.volume == 1.0
    sample.set_volume(-1.0)
    assert sample.volume == 0.0


def test_set_looping_defaults_to_true():
    sample = AudioSample()
    sample.set_looping()
    assert sample.looping is True
    sample.set_looping(False)
    assert sample.looping is False


def test_play_without_sample_raises():
    with pytest.raises(RuntimeError):
        AudioSample().play()


def test_load_missing_file_raises(tmp_path):
    sample = AudioSample()
    with pytest.raises(ResourceLoadError):
        sample.load(str(tmp_path / "missing.wav"), None)
    assert sample.is_loaded is False


def test_samples_are_cloneable():
    sample = AudioSample()
    assert sample.is_cloneable() is True
    assert sample.clone() is sample