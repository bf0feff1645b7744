# -*- coding: utf-8 -*-
"""Jzazbz and JzCzhz."""

import pytest

from chroma_spaces import XYZ, Jab, JCh

SAMPLE = (0.20654008, 0.12197225, 0.05136952)
SAMPLE_JAB = (0.00535048, 0.00924302, 0.00526007)


def test_jab_from_xyz():
    jab = Jab.from_xyz(XYZ(*SAMPLE))
    assert jab.components == pytest.approx(SAMPLE_JAB, abs=1e-4)


def test_jab_to_xyz():
    xyz = Jab(*SAMPLE_JAB).to_xyz()
    assert xyz.components == pytest.approx(SAMPLE, abs=1e-4)


def test_jab_round_trip_is_tight():
    source = XYZ(*SAMPLE, opacity=0.3)
    back = Jab.from_xyz(source).to_xyz()
    assert back.components == pytest.approx(source.components, abs=1e-9)
    assert back.opacity == 0.3


def test_jch_from_xyz():
    jch = JCh.from_xyz(XYZ(*SAMPLE))
    assert jch.lightness == pytest.approx(0.00535048, abs=1e-4)
    assert jch.chroma == pytest.approx(0.0106349296, abs=1e-4)
    assert jch.hue == pytest.approx(0.5173784272, abs=1e-3)


def test_jch_to_xyz():
    jab = JCh(0.00535048, 0.0106349296, 0.5173784272).to_parent()
    assert jab.a == pytest.approx(SAMPLE_JAB[1], abs=1e-6)
    assert jab.b == pytest.approx(SAMPLE_JAB[2], abs=1e-6)
