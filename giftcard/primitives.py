""" Common project data structures """
import json

from requests.structures import CaseInsensitiveDict


class Transaction:
    """ One line of the card statement. Values are kept exactly as the site renders them """

    def __init__(self, date='', details='', description='', amount='', balance=''):
        self._date = date
        self._details = details
        self._description = description
        self._amount = amount
        self._balance = balance

    @property
    def date(self):
        return self._date

    @property
    def details(self):
        return self._details

    @property
    def description(self):
        return self._description

    @property
    def amount(self):
        return self._amount

    @property
    def balance(self):
        return self._balance

    def to_dict(self):
        return {
            'date': self._date,
            'details': self._details,
            'description': self._description,
            'amount': self._amount,
            'balance': self._balance,
        }

    def __eq__(self, other):
        if not isinstance(other, Transaction):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return json.dumps(self.to_dict(), ensure_ascii=False)


class Card:
    """ Card summary and transaction history. Card() is the empty card """

    def __init__(self, card_no='', account_no='', loads_to_date='', purchases_to_date='',
                 available_balance='', purchased_date='', expiry_date='', transactions=()):
        self._card_no = card_no
        self._account_no = account_no
        self._loads_to_date = loads_to_date
        self._purchases_to_date = purchases_to_date
        self._available_balance = available_balance
        self._purchased_date = purchased_date
        self._expiry_date = expiry_date
        self._transactions = tuple(transactions)

    @property
    def card_no(self):
        return self._card_no

    @property
    def account_no(self):
        return self._account_no

    @property
    def loads_to_date(self):
        return self._loads_to_date

    @property
    def purchases_to_date(self):
        return self._purchases_to_date

    @property
    def available_balance(self):
        return self._available_balance

    @property
    def purchased_date(self):
        return self._purchased_date

    @property
    def expiry_date(self):
        return self._expiry_date

    @property
    def transactions(self):
        return self._transactions

    def is_empty(self):
        return self == Card()

    def to_dict(self):
        return {
            'card_no': self._card_no,
            'account_no': self._account_no,
            'loads_to_date': self._loads_to_date,
            'purchases_to_date': self._purchases_to_date,
            'available_balance': self._available_balance,
            'purchased_date': self._purchased_date,
            'expiry_date': self._expiry_date,
            'transactions': [t.to_dict() for t in self._transactions],
        }

    def __eq__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return json.dumps(self.to_dict(), ensure_ascii=False)


class Response:
    """ Simplified HTTP response kept for diagnostics. Response() means no exchange took place """

    def __init__(self, status_code=0, body=b'', headers=None, url='', reason=''):
        self.status_code = status_code
        self.body = body
        self.headers = CaseInsensitiveDict(headers or {})
        self.url = url
        self.reason = reason

    @staticmethod
    def create(response):
        """ Takes a requests.Response """
        return Response(status_code=response.status_code, body=response.content,
                        headers=response.headers, url=response.url, reason=response.reason or '')

    def with_status(self, status_code: int):
        return Response(status_code=status_code, body=self.body, headers=self.headers, url=self.url,
                        reason=self.reason)

    def __repr__(self):
        return f'<Response [{self.status_code}] {len(self.body)} bytes>'
