"""Shared fixtures: YAML documents decoded the way callers hand them to us."""

import pytest
import yaml

from structident.config import reset_settings
from structident.conversion import from_decoded


def load(text: str):
    """Decode a YAML snippet into ordered records."""
    return from_decoded(yaml.safe_load(text))


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def containers():
    return load(
        """
        - name: nginx
          image: nginx:1.25
          ports: [80, 443]
        - name: redis
          image: redis:7
        - name: sidecar
          image: envoy:1.29
        """
    )


@pytest.fixture
def deployment():
    return load(
        """
        apiVersion: apps/v1
        kind: Deployment
        metadata:
          name: web
          labels:
            app: web
        spec:
          replicas: 2
          template:
            spec:
              containers:
              - name: nginx
                image: nginx:1.25
              - name: redis
                image: redis:7
              args:
              - --verbose
              - --port=8080
        """
    )
