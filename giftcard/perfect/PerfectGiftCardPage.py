import logging

from bs4 import BeautifulSoup

from giftcard.IPageParser import IPageParser
from giftcard.errors import ApplicationError, AuthenticationError
from giftcard.primitives import Card, Transaction

logger = logging.getLogger(__name__)


class PerfectGiftCardPage(IPageParser):
    """
        Reads the ASP.NET page served after the login form is posted.

        The summary labels are looked up by element id, the statement is the
        #dgPointsStatement grid whose first row holds the column titles.
    """

    _summary_fields = {
        'card_no': '#ctl00_DefaultContent_lblMembershipNumber',
        'account_no': '#ctl00_DefaultContent_lblAccountNumber',
        'loads_to_date': '#ctl00_DefaultContent_lblcardvalue',
        'purchases_to_date': '#ctl00_DefaultContent_lblpurchasestodate',
        'available_balance': '#ctl00_DefaultContent_lblavailablebalance',
        'purchased_date': '#ctl00_DefaultContent_lblCardPurchasedDate',
        'expiry_date': '#ctl00_DefaultContent_lblCardExpiryDate',
    }
    _statement_rows = '#dgPointsStatement tr'
    _transaction_columns = ('date', 'details', 'description', 'amount', 'balance')
    _auth_error = '#htmltdErrorDescription'
    _application_error = '.content-error h3'

    def __init__(self, features='html.parser'):
        IPageParser.__init__(self)
        self._features = features

    def parse(self, html: bytes) -> Card:
        soup = BeautifulSoup(html, self._features)

        # auth error wins over the generic error page
        element = soup.select_one(self._auth_error)
        if element is not None:
            raise AuthenticationError(element.get_text().strip())
        if soup.select_one(self._application_error) is not None:
            raise ApplicationError()

        summary = {name: self._text(soup, selector) for name, selector in self._summary_fields.items()}
        transactions = [self._parse_row(row) for row in soup.select(self._statement_rows)[1:]]
        logger.debug('parsed card summary with %d transactions', len(transactions))
        return Card(transactions=transactions, **summary)

    def _parse_row(self, row) -> Transaction:
        cells = {column: self._text(row, f'td:nth-of-type({i})')
                 for i, column in enumerate(self._transaction_columns, start=1)}
        return Transaction(**cells)

    @staticmethod
    def _text(node, selector: str) -> str:
        element = node.select_one(selector)
        if element is None:
            return ''
        return element.get_text().strip()
