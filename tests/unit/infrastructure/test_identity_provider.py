from concurrent.futures import ThreadPoolExecutor

from payment_intentions.application.ports import IdentityProvider
from payment_intentions.domain.value_objects import PaymentIntentionId
from payment_intentions.infrastructure import SequentialIdentityProvider, UuidIdentityProvider


class TestUuidIdentityProvider:
    def test_implements_identity_provider_interface(self) -> None:
        assert isinstance(UuidIdentityProvider(), IdentityProvider)

    def test_returns_distinct_ids(self) -> None:
        provider = UuidIdentityProvider()

        ids = {provider.next_id() for _ in range(100)}

        assert len(ids) == 100


class TestSequentialIdentityProvider:
    def test_ids_are_sequential(self) -> None:
        provider = SequentialIdentityProvider()

        assert provider.next_id() == PaymentIntentionId("pi-1")
        assert provider.next_id() == PaymentIntentionId("pi-2")

    def test_custom_prefix(self) -> None:
        assert SequentialIdentityProvider(prefix="test").next_id().value == "test-1"

    def test_unique_across_threads(self) -> None:
        provider = SequentialIdentityProvider()

        with ThreadPoolExecutor(max_workers=8) as executor:
            ids = list(executor.map(lambda _: provider.next_id(), range(200)))

        assert len(set(ids)) == 200
