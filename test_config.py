"""Tests for configuration settings"""
import os
import re

import config

GUI_SOURCE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "gui.py")


def test_palettes_share_keys():
    assert set(config.NEU_LIGHT) == set(config.NEU_DARK)


def test_every_palette_colour_is_used():
    with open(GUI_SOURCE, encoding="utf-8") as f:
        used = set(re.findall(r'T\["([a-z_]+)"\]', f.read()))
    assert set(config.NEU_LIGHT) == used


def test_get_theme():
    assert config.get_theme(True) is config.NEU_DARK
    assert config.get_theme(False) is config.NEU_LIGHT
