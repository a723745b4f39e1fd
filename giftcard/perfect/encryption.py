""" RSA helpers for the login form. The site wants "<pin>|<random number>" encrypted with PKCS#1 v1.5 """
import logging
import re

from Crypto.Cipher import PKCS1_v1_5
from Crypto.PublicKey import RSA
from Crypto.PublicKey.RSA import RsaKey

from giftcard.errors import EncryptionError, KeyConstructionError

logger = logging.getLogger(__name__)

_HEX = re.compile(r'[0-9a-fA-F]+')


def make_public_key(modulus: str, exponent: str) -> RsaKey:
    """ Both values are hex strings, as they appear in the site's login page script """
    if not _HEX.fullmatch(modulus):
        raise KeyConstructionError('invalid modulus')
    n = int(modulus, 16)
    try:
        e = int(exponent, 16)
    except ValueError as err:
        raise KeyConstructionError(str(err)) from err
    # int() also takes 0x prefixes, underscores and padding
    if not _HEX.fullmatch(exponent):
        raise KeyConstructionError(f'invalid exponent: {exponent!r}')
    try:
        return RSA.construct((n, e))
    except ValueError as err:
        raise KeyConstructionError(str(err)) from err


def encrypt_pin(pin: str, random_no: str, public_key: RsaKey) -> bytes:
    if public_key is None or not public_key.n:
        raise EncryptionError('missing public modulus')
    cipher = PKCS1_v1_5.new(public_key)
    try:
        encrypted = cipher.encrypt(f'{pin}|{random_no}'.encode('utf-8'))
    except (ValueError, TypeError) as e:
        raise EncryptionError(str(e)) from e
    logger.debug('pin encrypted with a %d bit key', public_key.size_in_bits())
    return encrypted
