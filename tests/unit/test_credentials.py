import unittest
from unittest import mock

from scrap2md.core.credentials import first_credential, resolve_credential


class ResolveCredentialTest(unittest.TestCase):
    def test_explicit_wins_over_everything(self):
        interactive = mock.Mock(return_value="from-browser")
        for env_value in [None, "", "_zenn_session=env"]:
            with self.subTest(env_value=env_value):
                self.assertEqual(
                    resolve_credential("_zenn_session=cli", env_value, interactive),
                    "_zenn_session=cli",
                )
        interactive.assert_not_called()

    def test_explicit_used_as_is(self):
        self.assertEqual(resolve_credential("a=1; b=2", None, None), "a=1; b=2")

    def test_env_used_when_explicit_missing(self):
        interactive = mock.Mock(return_value="from-browser")
        self.assertEqual(resolve_credential(None, "_zenn_session=env", interactive), "_zenn_session=env")
        self.assertEqual(resolve_credential("  ", "_zenn_session=env", interactive), "_zenn_session=env")
        interactive.assert_not_called()

    def test_interactive_only_when_both_missing(self):
        interactive = mock.Mock(return_value="_zenn_session=browser")
        self.assertEqual(resolve_credential(None, "", interactive), "_zenn_session=browser")
        interactive.assert_called_once_with()

    def test_anonymous_without_interactive_source(self):
        self.assertIsNone(resolve_credential(None, None, None))

    def test_interactive_errors_propagate(self):
        interactive = mock.Mock(side_effect=RuntimeError("boom"))
        with self.assertRaises(RuntimeError):
            resolve_credential(None, None, interactive)


def test_first_credential_short_circuits():
    calls = []

    def source(name, value):
        def _inner():
            calls.append(name)
            return value
        return (name, _inner)

    result = first_credential([source("a", None), source("b", "x=1"), source("c", "y=2")])
    assert result == "x=1"
    assert calls == ["a", "b"]


if __name__ == "__main__":
    unittest.main()
