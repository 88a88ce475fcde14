from __future__ import annotations

import pytest


@pytest.fixture
def keyless_payload():
    return {
        "signatures": [
            {
                "image": "reg/img:1.0",
                "keyless": [{"issuer": "https://issuer", "subject": "subj"}],
            }
        ]
    }


@pytest.fixture
def all_kinds_payload():
    """One entry of every signature kind, in a deliberately mixed order."""
    return {
        "signatures": [
            {
                "image": "ghcr.io/example/app:*",
                "owner": "octocat",
                "repo": "example-repo",
            },
            {
                "image": "registry.testing.lan/busybox:1.0.0",
                "pubKeys": ["-----BEGIN PUBLIC KEY-----\nabc\n-----END PUBLIC KEY-----"],
                "annotations": {"env": "prod", "team": "prod"},
            },
            {
                "image": "registry.testing.lan/prefix:*",
                "keylessPrefix": [
                    {"issuer": "https://token.actions.githubusercontent.com", "subject": "https://github.com/example/"}
                ],
            },
            {
                "image": "registry.testing.lan/nginx:1.25",
                "keyless": [{"issuer": "https://github.com/login/oauth", "subject": "user@example.com"}],
                "annotations": {"env": "prod"},
            },
        ],
        "modifyImagesWithDigest": False,
    }
