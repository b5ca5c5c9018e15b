# -*- coding: utf-8; -*-

import logging

from httprange import request, response
from httprange.blackboard import Blackboard


log = logging.getLogger(__name__)


class Exchange(Blackboard):

    """A request together with the responses it got.

    Most range checks compare a response against its request
    (was a ``206`` asked for? does its ``Content-Range`` lie within
    the requested ranges?), so both are kept here and each response
    is given a link back to the request.
    """

    self_name = u'exch'

    def __init__(self, req, resps):
        """
        :param req:
            The :class:`~httprange.Request`, or `None` if it is unknown,
            in which case the responses are only checked on their own.
        :param resps:
            A list of :class:`~httprange.Response` objects,
            such as an interim ``100 Continue`` and then a final ``206``.
            May be empty.
        """
        super(Exchange, self).__init__()
        self.request = req
        self.responses = list(resps)
        for resp in self.responses:
            resp.request = req

    def __repr__(self):
        return 'Exchange(%r, %r)' % (self.request, self.responses)

    @property
    def children(self):
        messages = [] if self.request is None else [self.request]
        return messages + self.responses


def check_exchange(exch):
    """Run all range checks on `exch`, reporting notices in place."""
    log.debug('checking %r', exch)
    if exch.request is not None:
        request.check_request(exch.request)
    response.check_responses(exch.responses)
