"""Extenders decorate a builder's output before it is cached.

Extenders run in the order they were added. Once a key is resolved, adding
another extender raises ``AlreadyResolvedError`` instead of being ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from lazywire import AlreadyResolvedError, Container


@dataclass
class HttpClient:
    base_url: str
    headers: dict[str, str] = field(default_factory=dict)


def add_user_agent(client: HttpClient, container: Container) -> HttpClient:
    client.headers["User-Agent"] = container.get("app.name")
    return client


def add_auth(client: HttpClient, container: Container) -> HttpClient:
    client.headers["Authorization"] = f"Bearer {container.get('api.token')}"
    return client


def main() -> None:
    container = Container()
    container.set_value("app.name", "lazywire-demo")
    container.set_value("api.token", "secret")
    container.set("http", lambda c: HttpClient(base_url="https://api.example.com"))

    container.extend("http", add_user_agent)
    container.extend("http", add_auth)

    client = container.get("http")
    print(f"headers={list(client.headers)}")  # => headers=['User-Agent', 'Authorization']

    try:
        container.extend("http", add_auth)
    except AlreadyResolvedError as error:
        print(f"late_extend={type(error).__name__}")  # => late_extend=AlreadyResolvedError

    print(f"unchanged={container.get('http') is client}")  # => unchanged=True


if __name__ == "__main__":
    main()
