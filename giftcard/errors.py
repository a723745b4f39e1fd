""" Errors raised by the gift card client. Every one of them carries the response seen so far """
from giftcard.primitives import Response


class GiftCardError(Exception):

    def __init__(self, message, response: Response = None):
        Exception.__init__(self, message)
        self.response = response if response is not None else Response()


class KeyConstructionError(GiftCardError):
    """ Bad public key modulus or exponent """


class EncryptionError(GiftCardError):
    """ The PIN could not be encrypted with the configured public key """


class TransportError(GiftCardError):
    """ Network failure or an HTTP error status """


class AuthenticationError(GiftCardError):
    """ The site rejected the card number or the PIN. The message is the site's own text """
    status_code = 401


class ApplicationError(GiftCardError):
    """ The site rendered its generic error page """
    status_code = 500

    def __init__(self, message='internal server error', response: Response = None):
        GiftCardError.__init__(self, message, response)
