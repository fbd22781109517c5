"""Minimal example for the structural helpers on a settings document."""

from nestkit import MISSING, deep_merge, diff, flatten, get_path, remove_path, set_path, unflatten


def main() -> None:
    """Layer an override onto defaults and inspect what changed."""
    defaults = {"server": {"host": "localhost", "port": 8080}, "features": ["search"]}
    override = {"server": {"port": 9090}, "debug": True}

    settings = deep_merge(defaults, override)
    print("merged:", settings)
    print("changed vs defaults:", diff(settings, defaults))

    flat = flatten(settings)
    print("flat:", flat)
    print("round trip ok:", unflatten(flat) == settings)

    _ = set_path(settings, "server.tls.enabled", False)
    print("tls:", get_path(settings, "server.tls.enabled"))
    _ = remove_path(settings, "server.tls")
    print("tls removed:", get_path(settings, "server.tls") is MISSING)


if __name__ == "__main__":
    main()
