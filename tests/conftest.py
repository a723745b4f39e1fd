from pathlib import Path

import pytest
import requests
from Crypto.PublicKey import RSA

from giftcard.perfect import PerfectGiftCardAPI
from giftcard.perfect.PerfectGiftCardAPI import PerfectGiftCardApi

FIXTURES = Path(__file__).resolve().parent / 'fixtures'
BASE_URL = 'http://giftcards.test/theperfectgiftcard/'


def load_fixture(name: str) -> bytes:
    return (FIXTURES / f'{name}.html').read_bytes()


def make_response(body: bytes, status_code=200, reason='OK', url=BASE_URL) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.url = url
    response.headers['Content-Type'] = 'text/html; charset=utf-8'
    response._content = body
    return response


class FakePost:
    """ Stands in for requests.post and remembers what it was called with """

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def __call__(self, url, data=None, **kwargs):
        self.calls.append({'url': url, 'data': data, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture(scope='session')
def private_key():
    return RSA.generate(1024)


@pytest.fixture
def client(private_key):
    return PerfectGiftCardApi(base_url=BASE_URL, modulus=format(private_key.n, 'X'),
                              exponent=format(private_key.e, 'x'))


@pytest.fixture
def serve(monkeypatch):
    """ serve('success') answers every POST with that fixture page """

    def _serve(name=None, status_code=200, reason='OK', error=None):
        response = make_response(load_fixture(name), status_code, reason) if name else None
        fake = FakePost(response=response, error=error)
        monkeypatch.setattr(PerfectGiftCardAPI.requests, 'post', fake)
        return fake

    return _serve
