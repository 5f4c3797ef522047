"""Tests for DatasetStore."""

import itertools
from concurrent.futures import ThreadPoolExecutor

import pytest

from stocksim.market.dataset import build_dataset
from stocksim.market.exceptions import InvalidInput
from stocksim.market.models import InstrumentSpec, Market
from stocksim.market.store import DatasetStore


@pytest.fixture
def generation_builder(make_synth):
    """Builder whose n-th dataset prices every instrument at exactly n."""
    counter = itertools.count(1)
    synth = make_synth()

    def builder():
        n = float(next(counter))
        specs = [
            InstrumentSpec(f"S{i}", f"Stock {i}", Market.BMV if i % 2 else Market.BNY, n)
            for i in range(8)
        ]
        return build_dataset(specs, ("USD",), synthesizer=synth)

    return builder


class TestDatasetStore:
    """Unit tests for the snapshot store."""

    def test_first_read_builds(self, generation_builder):
        """Test that the first snapshot read builds and publishes a dataset."""
        store = DatasetStore(generation_builder)
        assert store.version == 0
        assert not store.is_built

        snapshot = store.snapshot
        assert len(snapshot) == 8
        assert store.version == 1
        assert store.snapshot is snapshot  # No rebuild on later reads

    def test_regenerate_swaps_snapshot(self, generation_builder):
        """Test that regenerate() publishes a new object, leaving the old intact."""
        store = DatasetStore(generation_builder)
        old = store.snapshot
        new = store.regenerate()

        assert new is not old
        assert store.snapshot is new
        assert store.version == 2
        assert {i.last_value for i in old.instruments()} == {1.0}
        assert {i.last_value for i in new.instruments()} == {2.0}

    def test_publish(self, dataset, generation_builder):
        """Test publishing an externally built dataset."""
        store = DatasetStore(generation_builder)
        store.publish(dataset)
        assert store.snapshot is dataset
        assert store.version == 1

    def test_failed_regenerate_keeps_previous(self, dataset):
        """A builder that raises leaves the published snapshot in place."""
        def failing_builder():
            raise InvalidInput("bad base price")

        store = DatasetStore(failing_builder)
        store.publish(dataset)
        with pytest.raises(InvalidInput):
            store.regenerate()
        assert store.snapshot is dataset
        assert store.version == 1

    def test_readers_never_see_a_mix(self, generation_builder):
        """Concurrent readers always see one generation per snapshot."""
        store = DatasetStore(generation_builder)
        store.regenerate()

        def read(_):
            snapshot = store.snapshot
            return {i.last_value for i in snapshot.instruments()}

        def write(_):
            store.regenerate()
            return None

        with ThreadPoolExecutor(max_workers=8) as pool:
            futures = [
                pool.submit(write if n % 5 == 0 else read, n) for n in range(200)
            ]
            results = [f.result() for f in futures]

        for seen in results:
            if seen is not None:
                assert len(seen) == 1
        assert store.version == 1 + 40
