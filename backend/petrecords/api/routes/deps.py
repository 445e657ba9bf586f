"""Module: deps."""

from fastapi import Request

from petrecords.db.gateway import Gateway


# Dependency provider: the process-wide gateway attached by create_app.
def get_gateway(request: Request) -> Gateway:
    return request.app.state.gateway
