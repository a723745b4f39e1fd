import logging
from types import MappingProxyType

import requests

from giftcard.IPageParser import IPageParser
from giftcard.errors import ApplicationError, AuthenticationError, TransportError
from giftcard.perfect.encryption import encrypt_pin, make_public_key
from giftcard.perfect.PerfectGiftCardPage import PerfectGiftCardPage
from giftcard.primitives import Card, Response

logger = logging.getLogger(__name__)

BASE_URL = 'https://giftcards.indue.com.au/theperfectgiftcard/'
MODULUS = 'D4229AD35AE3FE60E192948079DFEE523E018CE5931E6FF68A70C20A2A91D80FF09604DE9F4100C5B91A8433712428B35F3CC6C4CA814715BE470D811E73BE497788CA38494CADAF4825E78A508FAB023F65FC4722306FE7ECF1AC41C19AE5C4EFD3ACFE99EE08B60794EC19D57EA0E3556EE53F8DAECAB67DB47AFBC0F856AD'
EXPONENT = '010001'
RANDOM_NO = '7464663221746466322174646632217464663221'

# taken from the login page, the site checks them against each other
FORM_FIELDS = MappingProxyType({
    '__VIEWSTATE': '/wEPDwUJODY3MDYzNzgzD2QWAgIDD2QWBmYPFgIeB1Zpc2libGVoZAIDDw9kFgIeB29uY2xpY2sFFXJldHVybiBnZXRwYXNzd29yZCgpO2QCBg8WAh8AaGRkXcXstETbLhPK3PqD3TU7Io+Xaw4=',
    '__VIEWSTATEGENERATOR': '5898F960',
    '__EVENTVALIDATION': '/wEWBgKuoL7TCwLi0uqnCgK1qbSRCwKFoZPNAwLQvbH7BAL8yZzMCZCDAp2k+4wbYm+6XCicWxiA53iU',
    'cmdLogin': 'Â Log+in ',
    'hdnrandomnumber': RANDOM_NO,
})


class PerfectGiftCardApi(object):
    """
        Logs in to The Perfect Gift Card website and reads the card summary and statement.

        Nothing is kept between get_card calls, so one instance may be shared between threads.
    """

    def __init__(self, base_url: str = BASE_URL, modulus: str = MODULUS, exponent: str = EXPONENT,
                 timeout=None, parser: IPageParser = None):
        object.__init__(self)
        self.base_url = base_url
        self.public_key = make_public_key(modulus, exponent)
        self._timeout = timeout
        self._parser = parser or PerfectGiftCardPage()

    def get_card(self, card_no: str, pin: str) -> (Card, Response):
        """
            Returns the card and the raw response.

            Raises EncryptionError, TransportError, AuthenticationError or ApplicationError.
            The page is checked for the site's error markers whatever the HTTP status; an error
            status without a marker is a TransportError.
            The error's response holds whatever the site answered, with 401/500 put in place
            of the real status for the authentication and application errors.
        """
        encrypted_pin = encrypt_pin(pin, RANDOM_NO, self.public_key)
        response = self._post_login(self._create_payload(card_no, encrypted_pin))
        try:
            card = self._parser.parse(response.body)
        except AuthenticationError as e:
            logger.warning('login rejected for card %s: %s', _mask(card_no), e)
            e.response = response.with_status(AuthenticationError.status_code)
            raise
        except ApplicationError as e:
            logger.warning('site error page for card %s', _mask(card_no))
            e.response = response.with_status(ApplicationError.status_code)
            raise
        if response.status_code >= 400:
            raise TransportError(response.reason or f'HTTP {response.status_code}', response)
        logger.info('fetched card %s, %d transactions', _mask(card_no), len(card.transactions))
        return card, response

    @staticmethod
    def _create_payload(card_no: str, encrypted_pin: bytes) -> dict:
        """ Fresh copy of the form template per call """
        payload = dict(FORM_FIELDS)
        payload['txtCardNumber'] = card_no
        payload['hdnrequest'] = encrypted_pin.hex()
        return payload

    def _post_login(self, payload: dict) -> Response:
        logger.debug('POST %s', self.base_url)
        try:
            resp = requests.post(self.base_url, data=payload, timeout=self._timeout)
        except requests.RequestException as e:
            raise TransportError(str(e)) from e
        response = Response.create(resp)
        logger.debug('got HTTP %d, %d bytes', response.status_code, len(response.body))
        return response


def new_client(**kwargs) -> PerfectGiftCardApi:
    """ Client with the site's own URL and key. Raises KeyConstructionError """
    return PerfectGiftCardApi(**kwargs)


def _mask(card_no: str) -> str:
    return '*' * max(len(card_no) - 4, 0) + card_no[-4:]
