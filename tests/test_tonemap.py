import pytest

from renderkit.tonemap import ToneMappingMode, pbr_neutral, reinhard2, uchimura

UCHIMURA_DEFAULTS = dict(p=1.0, a=1.05, m=0.1, l=0.8, c=3.0, b=0.0)


def test_mode_values():
    assert [m.value for m in ToneMappingMode] == [0, 1, 2, 3]
    assert ToneMappingMode(2) is ToneMappingMode.UCHIMURA


@pytest.mark.parametrize("v", [0.0, 0.25, 1.0, 7.5])
def test_reinhard2_with_unit_white_is_identity(v):
    assert reinhard2(v, 1.0) == pytest.approx(v)


def test_reinhard2_maps_zero_to_zero():
    assert reinhard2(0.0, 2.0) == 0.0


def test_uchimura_black_is_pedestal():
    assert uchimura(0.0, **UCHIMURA_DEFAULTS) == pytest.approx(0.0)


def test_uchimura_is_monotonic():
    values = [uchimura(i / 100.0, **UCHIMURA_DEFAULTS) for i in range(1, 500)]
    assert all(b >= a - 1e-12 for a, b in zip(values, values[1:]))


def test_uchimura_approaches_max_brightness():
    assert uchimura(100.0, **UCHIMURA_DEFAULTS) == pytest.approx(UCHIMURA_DEFAULTS["p"], abs=1e-6)


def test_uchimura_linear_section_has_contrast_slope():
    lo = uchimura(0.4, **UCHIMURA_DEFAULTS)
    hi = uchimura(0.5, **UCHIMURA_DEFAULTS)
    assert (hi - lo) / 0.1 == pytest.approx(UCHIMURA_DEFAULTS["a"])


def test_pbr_neutral_zero_is_zero():
    assert pbr_neutral(0.0, 0.8, 0.15) == 0.0


def test_pbr_neutral_below_compression_subtracts_offset():
    assert pbr_neutral(0.5, 0.8, 0.15) == pytest.approx(0.5 - 0.04)


def test_pbr_neutral_compresses_highlights_below_one():
    values = [pbr_neutral(x, 0.8, 0.15) for x in (0.9, 2.0, 10.0, 100.0)]
    assert all(v < 1.0 for v in values)
    assert all(b > a for a, b in zip(values, values[1:]))