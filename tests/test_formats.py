"""Tests for encoding descriptors."""

import dataclasses

import pytest

from resolve_it.core.formats import (
    FORMAT_EXTENSIONS,
    IDENTITY_BANDS,
    QUALITY_MODES,
    EncodingDescriptor,
    FormatKind,
    extension,
    identity_key,
    is_lossless,
)


def all_descriptors():
    """Every descriptor that can be constructed."""
    qualities = range(1, 101)
    descriptors = [EncodingDescriptor.png()]
    descriptors += [EncodingDescriptor.jpeg(q) for q in qualities]
    for factory in (EncodingDescriptor.webp, EncodingDescriptor.jxl):
        descriptors.append(factory(None))
        descriptors += [factory(q) for q in qualities]
    return descriptors


@pytest.mark.parametrize("table", [FORMAT_EXTENSIONS, QUALITY_MODES, IDENTITY_BANDS])
def test_tables_cover_every_format(table):
    assert set(table) == set(FormatKind)


def test_identity_key_is_injective():
    descriptors = all_descriptors()
    keys = {identity_key(d) for d in descriptors}

    assert len(descriptors) == 1 + 100 + 2 * 101
    assert len(keys) == len(descriptors)


def test_identity_bands_do_not_overlap():
    ranges = []
    for lossless_band, quality_base in IDENTITY_BANDS.values():
        values = set()
        if lossless_band is not None:
            values.add(lossless_band)
        if quality_base is not None:
            values.update(quality_base + q for q in range(1, 101))
        ranges.append(values)

    for i, first in enumerate(ranges):
        for second in ranges[i + 1 :]:
            assert not first & second


def test_identity_key_layout():
    key = identity_key(EncodingDescriptor.webp(80))

    assert key[:2] == (2081).to_bytes(2, "big")
    assert key[2:] == b"webp"
    assert identity_key(EncodingDescriptor.png()) == b"\x00\x00png"
    assert identity_key(EncodingDescriptor.jxl()) == (3000).to_bytes(2, "big") + b"jxl"


def test_equality_and_hash_follow_kind_and_quality():
    assert EncodingDescriptor.jpeg(75) == EncodingDescriptor(FormatKind.JPEG, 75)
    assert hash(EncodingDescriptor.jpeg(75)) == hash(EncodingDescriptor.jpeg(75))
    assert EncodingDescriptor.jpeg(75) != EncodingDescriptor.jpeg(76)
    assert EncodingDescriptor.webp() != EncodingDescriptor.jxl()
    assert EncodingDescriptor.webp() != EncodingDescriptor.webp(100)
    assert EncodingDescriptor.webp(50) != EncodingDescriptor.jxl(50)


def test_descriptors_work_as_cache_keys():
    cache = {d: str(d) for d in all_descriptors()}

    assert len(cache) == len(all_descriptors())
    assert cache[EncodingDescriptor.webp()] == "webp(lossless)"


@pytest.mark.parametrize(
    "kind,expected", [("png", "png"), ("jpeg", "jpg"), ("webp", "webp"), ("jxl", "jxl")]
)
def test_extension_ignores_quality(kind, expected):
    matching = [d for d in all_descriptors() if d.kind is FormatKind(kind)]

    assert {extension(d) for d in matching} == {expected}
    assert matching[0].extension == expected


@pytest.mark.parametrize(
    "descriptor,label",
    [
        (EncodingDescriptor.png(), "png"),
        (EncodingDescriptor.jpeg(75), "jpeg(q=75)"),
        (EncodingDescriptor.webp(), "webp(lossless)"),
        (EncodingDescriptor.jxl(10), "jxl(q=10)"),
    ],
)
def test_str(descriptor, label):
    assert str(descriptor) == label


def test_is_lossless():
    assert is_lossless(EncodingDescriptor.png())
    assert is_lossless(EncodingDescriptor.webp())
    assert is_lossless(EncodingDescriptor.jxl())
    assert not is_lossless(EncodingDescriptor.jpeg(100))
    assert not is_lossless(EncodingDescriptor.webp(100))


@pytest.mark.parametrize("quality", [0, 101, -5, True, 50.0, "50"])
def test_invalid_quality_is_a_contract_violation(quality):
    with pytest.raises(AssertionError):
        EncodingDescriptor.webp(quality)


def test_quality_requirements_per_format():
    with pytest.raises(AssertionError):
        EncodingDescriptor(FormatKind.JPEG)
    with pytest.raises(AssertionError):
        EncodingDescriptor(FormatKind.PNG, 50)
    with pytest.raises(AssertionError):
        EncodingDescriptor("jpeg", 50)


def test_descriptor_is_immutable():
    descriptor = EncodingDescriptor.jpeg(75)

    with pytest.raises(dataclasses.FrozenInstanceError):
        descriptor.quality = 10
