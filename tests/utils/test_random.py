#!/usr/bin/env python
# -*- coding: utf-8 -*-

# Import modules
import numpy as np
import pytest

# Import from gappso
from gappso.utils import check_random_state


def test_seed_gives_generator():
    """Test if integer seeds give reproducible generators"""
    first = check_random_state(11)
    second = check_random_state(11)
    assert isinstance(first, np.random.Generator)
    assert first.random() == second.random()


def test_none_gives_generator():
    assert isinstance(check_random_state(None), np.random.Generator)


def test_generator_passes_through():
    rng = np.random.default_rng(0)
    assert check_random_state(rng) is rng


def test_duck_typed_source_passes_through(counting_rng):
    """Test if any object with random() and uniform() is accepted"""
    assert check_random_state(counting_rng) is counting_rng


@pytest.mark.parametrize("bad", ["seed", 1.5, object()])
def test_bad_source_raises(bad):
    with pytest.raises(TypeError):
        check_random_state(bad)
