import os
from pathlib import Path

import pytest
from protean.integrations.pytest import DomainFixture

# Test layer -> marker, by the directory a test module lives in
LAYER_MARKERS = {
    "domain": pytest.mark.domain,
    "application": pytest.mark.application,
    "bdd": pytest.mark.application,
    "integration": pytest.mark.integration,
}


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Framework environment (PROTEAN_ENV) for the test run",
    )


def pytest_sessionstart(session):
    """Select the framework environment and capture printed output in memory."""
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ["OUTPUT_ADAPTER"] = "memory"


def pytest_collection_modifyitems(config, items):
    for item in items:
        layers = set(Path(item.fspath).parts) & LAYER_MARKERS.keys()
        for layer in sorted(layers):
            item.add_marker(LAYER_MARKERS[layer])
        if "integration" in layers and not item.get_closest_marker("fast"):
            item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def storefront_bed():
    # Import every storefront module up front so init() does not import them a second time
    import storefront.catalogue.management  # noqa: F401
    import storefront.checkout.placement  # noqa: F401
    import storefront.cli  # noqa: F401
    import storefront.identity.registration  # noqa: F401
    import storefront.ordering.items  # noqa: F401
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    with storefront_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def clean_slate(_ctx):
    """Empty repositories, event store and captured output around every test."""
    from protean import current_domain
    from storefront.output import reset_output

    reset_output()
    yield

    for provider in current_domain.providers.values():
        provider._data_reset()
    current_domain.event_store.store._data_reset()
    reset_output()
