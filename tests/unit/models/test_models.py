"""Tests for wire naming of request/response models."""

from datetime import date

import pytest
from pydantic import ValidationError

from postmark_client.models import (
    BounceFilteringParameters,
    DomainDetails,
    FilteringParameters,
    Message,
    MessageSendingResponse,
    OutboundMessageOpensFilteringParameters,
    Server,
    SignatureDetails,
    StatisticsFilteringParameters,
)


class TestPostmarkModel:
    def test_server_round_trip(self):
        server = Server.model_validate({"ID": 42, "Name": "x"})
        assert server.id == 42
        assert server.name == "x"
        assert server.to_wire() == {"ID": 42, "Name": "x"}

    def test_unknown_fields_survive(self):
        server = Server.model_validate({"ID": 1, "BrandNewField": "v"})
        assert server.to_wire()["BrandNewField"] == "v"

    def test_snake_case_input_accepted(self):
        response = MessageSendingResponse(message_id="abc", error_code=0)
        assert response.to_wire() == {"MessageID": "abc", "ErrorCode": 0, "Message": ""}

    def test_message_from_alias(self):
        message = Message(from_="a@example.com", to="b@example.com", html_body="<b>x</b>")
        assert message.to_wire() == {"From": "a@example.com", "To": "b@example.com",
                                     "HtmlBody": "<b>x</b>"}

    def test_message_requires_sender(self):
        with pytest.raises(ValidationError):
            Message(to="b@example.com")

    def test_acronym_aliases(self):
        domain = DomainDetails.model_validate({
            "SPFVerified": True, "DKIMPendingHost": "h", "ReturnPathDomainCNAMEValue": "pm.mtasv.net",
        })
        assert domain.spf_verified is True
        assert domain.dkim_pending_host == "h"
        assert domain.return_path_domain_cname_value == "pm.mtasv.net"

    def test_signature_details(self):
        signature = SignatureDetails.model_validate({"ID": 1, "EmailAddress": "a@example.com",
                                                     "Confirmed": True})
        assert signature.email_address == "a@example.com"
        assert signature.confirmed is True


class TestFilters:
    def test_query_names(self):
        f = BounceFilteringParameters(
            count=10, email_filter="a@", message_id="m1",
            from_date=date(2024, 1, 1), message_stream="outbound",
        )
        assert f.to_query() == {
            "count": 10,
            "emailFilter": "a@",
            "messageID": "m1",
            "fromdate": "2024-01-01",
            "messagestream": "outbound",
        }

    def test_tracking_filters_use_snake_case(self):
        f = OutboundMessageOpensFilteringParameters(client_name="Gmail", os_family="Android")
        assert f.to_query() == {"client_name": "Gmail", "os_family": "Android"}

    def test_negative_count_rejected(self):
        with pytest.raises(ValidationError):
            FilteringParameters(count=-1)

    def test_stats_filter_has_no_paging(self):
        assert "count" not in StatisticsFilteringParameters.model_fields

    def test_filters_are_mutable(self):
        f = FilteringParameters()
        f.count = 5
        assert f.to_query() == {"count": 5}
