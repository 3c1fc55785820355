import importlib


def test_policy_env_overrides(monkeypatch):
    monkeypatch.setenv("SHARECHECK_WORKERS", "4")
    monkeypatch.setenv("SHARECHECK_BATCH_SIZE", "16")
    monkeypatch.setenv("SHARECHECK_REQUIRE_CORROBORATION", "yes")
    monkeypatch.setenv("SHARECHECK_DIGEST", "SHA512")
    monkeypatch.setenv("SHARECHECK_LOG_LEVEL", "debug")

    policy_module = importlib.import_module("sharecheck.config")
    reloaded = importlib.reload(policy_module)

    try:
        policy = reloaded.policy
        assert policy.workers == 4
        assert policy.batch_size == 16
        assert policy.require_corroboration is True
        assert policy.digest_algorithm == "sha512"
        assert policy.log_level == "DEBUG"
    finally:
        for name in (
            "SHARECHECK_WORKERS",
            "SHARECHECK_BATCH_SIZE",
            "SHARECHECK_REQUIRE_CORROBORATION",
            "SHARECHECK_DIGEST",
            "SHARECHECK_LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)
        importlib.reload(policy_module)


def test_malformed_values_fall_back(monkeypatch):
    from sharecheck.config import load_policy

    monkeypatch.setenv("SHARECHECK_WORKERS", "many")
    monkeypatch.setenv("SHARECHECK_BATCH_SIZE", "-3")
    monkeypatch.setenv("SHARECHECK_REQUIRE_CORROBORATION", "maybe")
    policy = load_policy()
    assert policy.workers == 1
    assert policy.batch_size == 1
    assert policy.require_corroboration is False
