from giftcard.primitives import Card


class IPageParser:
    """ Turns the page returned after logging in into a Card. Swap it out to feed the client canned HTML. """

    def parse(self, html: bytes) -> Card:
        """ Raises AuthenticationError or ApplicationError when the page says so """
        pass
