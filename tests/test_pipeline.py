import numpy as np
import pytest

from imgpool.image import Image
from imgpool.operations import PREWITT_KERNEL, convolve, max_pool, min_pool
from imgpool.pipeline import Actor, Convolution


@pytest.fixture(autouse=True)
def _reset_singleton():
    Convolution.reset()
    yield
    Convolution.reset()


@pytest.fixture
def image_path(tmp_path):
    rng = np.random.default_rng(7)
    data = rng.integers(0, 256, size=(6, 8, 4), dtype=np.uint8)
    path = tmp_path / "input.png"
    Image(data).save(path)
    return path


def test_actor_from_string():
    assert Actor("HOST") is Actor.HOST
    assert Actor.DEVICE.prefix == "Device"


def test_conv_calc_host_writes_file(image_path, tmp_path):
    out = tmp_path / "out"
    out.mkdir()
    conv = Convolution(image_path, out)
    result = conv.conv_calc(Actor.HOST)
    written = Image.load(out / "HostConvCalc.png")
    expected = convolve(Image.load(image_path), PREWITT_KERNEL)
    assert np.array_equal(written.data, expected.data)
    assert np.array_equal(result.data, expected.data)
    assert conv.result is result


def test_device_matches_host(image_path, tmp_path):
    conv = Convolution(image_path, tmp_path)
    host = conv.max_pool(Actor.HOST)
    device = conv.max_pool("DEVICE")
    assert np.array_equal(host.data, device.data)
    assert (tmp_path / "DeviceMaxP.png").exists()


def test_min_pool_output(image_path, tmp_path):
    conv = Convolution(image_path, tmp_path)
    result = conv.min_pool(Actor.HOST)
    expected = min_pool(Image.load(image_path))
    assert np.array_equal(Image.load(tmp_path / "HostMinP.png").data, expected.data)
    assert result.width == conv.image.width // 2


def test_max_pool_not_below_min_pool(image_path, tmp_path):
    conv = Convolution(image_path, tmp_path)
    high = conv.max_pool(Actor.HOST).data[:, :, :3]
    low = conv.min_pool(Actor.HOST).data[:, :, :3]
    assert np.all(high >= low)
    assert np.array_equal(high, max_pool(conv.image).data[:, :, :3])


def test_unsupported_actor(image_path, tmp_path):
    conv = Convolution(image_path, tmp_path)
    with pytest.raises(ValueError):
        conv.conv_calc("GPU")


def test_instance_needs_path_first():
    with pytest.raises(RuntimeError):
        Convolution.instance()


def test_instance_is_shared(image_path, tmp_path):
    first = Convolution.instance(image_path)
    other = tmp_path / "other.png"
    Image.blank(4, 4).save(other)
    assert Convolution.instance(other) is first
    assert Convolution.instance() is first


def test_reset_creates_new_instance(image_path):
    first = Convolution.instance(image_path)
    Convolution.reset()
    second = Convolution.instance(image_path)
    assert second is not first
    assert np.array_equal(first.image.data, second.image.data)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Convolution(tmp_path / "missing.png")