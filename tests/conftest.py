import os

import pytest

from lin_api.core.fields import basic_person_fields, standard_person_fields


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("LIN_API_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def standard_person():
    return standard_person_fields()


@pytest.fixture
def basic_person():
    return basic_person_fields()


@pytest.fixture
def proxied_image_url():
    return (
        "http://media.linkedin.com/media-proxy/ext?w=80&h=100&hash=abc"
        "&url=http%3A%2F%2Fexample.com%2Fimg.png%3Fsize%3Dlarge"
    )
