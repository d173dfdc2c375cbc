from payment_intentions.application.ports import UserDirectory
from payment_intentions.infrastructure import InMemoryUserDirectory


class TestInMemoryUserDirectory:
    def test_implements_user_directory_interface(self) -> None:
        assert isinstance(InMemoryUserDirectory(), UserDirectory)

    def test_known_user_exists(self) -> None:
        assert InMemoryUserDirectory([1, 2]).exists(2) is True

    def test_unknown_user_does_not_exist(self) -> None:
        assert InMemoryUserDirectory([1, 2]).exists(3) is False

    def test_added_user_exists(self) -> None:
        directory = InMemoryUserDirectory()

        directory.add(42)

        assert directory.exists(42) is True
