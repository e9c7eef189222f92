import numpy as np
import pytest
from PIL import Image

from crack_triage.complexity import (
    analyze_complexity,
    combine_ratios,
    gradient_map,
    pixel_statistics,
)
from crack_triage.exceptions import ImageProcessingError
from crack_triage.models import PixelStatistics


def test_featureless_bright_image_hits_floor(uniform_image):
    img = uniform_image(200)

    stats = pixel_statistics(img)

    assert stats.edge_ratio == 0
    assert stats.dark_ratio == 0
    assert analyze_complexity(img) == 0.05


def test_all_crack_like_image_scores_dark_weights_only(uniform_image):
    stats = pixel_statistics(uniform_image(50))

    assert stats.edge_ratio == 0
    assert stats.strong_edge_ratio == 0
    assert stats.dark_ratio == 1
    assert stats.crack_like_ratio == 1
    assert analyze_complexity(uniform_image(50)) == pytest.approx(0.3)


def test_dark_but_not_crack_like(uniform_image):
    assert analyze_complexity(uniform_image(100)) == pytest.approx(0.2)


def test_brightness_is_channel_mean():
    # pure red averages to 85: dark, not crack-like
    img = np.zeros((200, 200, 3), dtype=np.uint8)
    img[..., 0] = 255

    stats = pixel_statistics(img)

    assert stats.dark_ratio == 1
    assert stats.crack_like_ratio == 0


def test_checkerboard_scores_below_one():
    y, x = np.mgrid[0:200, 0:200]
    gray = np.where((x + y) % 2 == 0, 0, 255).astype(np.uint8)
    img = np.stack([gray] * 3, axis=-1)

    stats = pixel_statistics(img)
    score = analyze_complexity(img)

    assert stats.edge_ratio == 1
    assert stats.strong_edge_ratio == 1
    assert stats.dark_ratio == pytest.approx(0.5)
    assert score == pytest.approx(0.85)
    assert score <= 1.0


def test_scan_excludes_border(uniform_image):
    assert pixel_statistics(uniform_image(200)).scanned_pixels == 198 * 198


def test_large_input_is_downsampled(uniform_image):
    assert pixel_statistics(uniform_image(220, size=(1024, 768))).scanned_pixels == 198 * 198


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_noise_stays_in_range(seed):
    rng = np.random.default_rng(seed)
    img = rng.integers(0, 256, size=(300, 400, 3), dtype=np.uint8)

    assert 0.05 <= analyze_complexity(img) <= 1.0


def test_single_line_registers_edges_and_dark_pixels(diagonal_line):
    stats = pixel_statistics(diagonal_line)

    assert stats.strong_edge_ratio > 0
    assert stats.dark_ratio > 0
    assert stats.dark_ratio < 0.05
    assert analyze_complexity(diagonal_line) < 0.75


def test_denser_cracks_never_lower_the_score(crack_network):
    scores = [analyze_complexity(crack_network(period)) for period in (40, 20, 10, 5)]

    assert scores == sorted(scores)
    assert scores[0] < scores[-1]


def test_input_is_not_mutated(crack_network):
    img = crack_network(10)
    before = img.copy()

    analyze_complexity(img)

    np.testing.assert_array_equal(img, before)


def test_accepts_pil_images(crack_network):
    array = crack_network(10)

    assert analyze_complexity(Image.fromarray(array)) == analyze_complexity(array)


def test_accepts_rgba_and_grayscale():
    rgba = np.full((120, 80, 4), 50, dtype=np.uint8)
    gray = np.full((120, 80), 50, dtype=np.uint8)

    assert analyze_complexity(rgba) == pytest.approx(0.3)
    assert analyze_complexity(gray) == pytest.approx(0.3)


@pytest.mark.parametrize("image", [
    np.zeros((0, 200, 3), dtype=np.uint8),
    np.zeros((200, 0, 3), dtype=np.uint8),
    Image.new("RGB", (0, 50)),
    "not an image",
    None,
])
def test_unreadable_input_falls_back(image):
    assert analyze_complexity(image) == 0.15


def test_pixel_statistics_raises_on_zero_dimension():
    with pytest.raises(ImageProcessingError):
        pixel_statistics(np.zeros((0, 10, 3), dtype=np.uint8))


def test_combine_ratios_clamps_to_one():
    stats = PixelStatistics(
        edge_ratio=2.0, strong_edge_ratio=2.0, dark_ratio=2.0, crack_like_ratio=2.0,
        scanned_pixels=1,
    )

    assert combine_ratios(stats) == 1.0


def test_combine_ratios_floor():
    stats = PixelStatistics(
        edge_ratio=0.01, strong_edge_ratio=0.0, dark_ratio=0.0, crack_like_ratio=0.0,
        scanned_pixels=1,
    )

    assert combine_ratios(stats) == 0.05


def test_gradient_map_shape(diagonal_line):
    edges = gradient_map(diagonal_line)

    assert edges.shape == (198, 198)
    assert edges.max() == 200


@pytest.mark.parametrize("image", [
    np.full((50, 50, 3), 0.9),
    np.full((50, 50, 3), 300, dtype=np.int32),
])
def test_non_uint8_arrays_fall_back(image):
    with pytest.raises(ImageProcessingError):
        pixel_statistics(image)
    assert analyze_complexity(image) == 0.15
