# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
JSON log lines — request id stamping and member fields.
"""
import json
import logging
import sys
from unittest.mock import patch

import pytest

from member_service.core.logging import JSONFormatter, RequestIDFilter, request_id_var
from member_service.errors import NotFoundError
from tests.conftest import make_member


def _record(msg="hello", **extra):
    record = logging.LogRecord("member", logging.INFO, __file__, 1, msg, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def _format(record):
    RequestIDFilter().filter(record)
    return json.loads(JSONFormatter().format(record))


class TestJSONFormatter:
    def test_request_id_taken_from_context(self):
        token = request_id_var.set("req-7")
        try:
            line = _format(_record())
        finally:
            request_id_var.reset(token)
        assert line["request_id"] == "req-7"
        assert line["message"] == "hello"

    def test_no_request_id_outside_a_request(self):
        assert "request_id" not in _format(_record())

    def test_member_fields_copied(self):
        line = _format(_record(operation="update", outcome="not_found", userid=3))
        assert (line["operation"], line["outcome"], line["userid"]) == ("update", "not_found", 3)

    def test_exception_type_reported(self):
        try:
            raise ValueError("bad id")
        except ValueError:
            record = logging.LogRecord("member", logging.ERROR, __file__, 1, "x", (), sys.exc_info())
        line = _format(record)
        assert line["error_type"] == "ValueError"


class TestServiceLogFields:
    def test_rejected_update_logs_userid_and_outcome(self, service):
        with patch("member_service.services.member_service.logger") as logger:
            with pytest.raises(NotFoundError):
                service.update_member(55, make_member())
        extra = logger.warning.call_args.kwargs["extra"]
        assert extra["operation"] == "update"
        assert extra["outcome"] == "not_found"
        assert extra["userid"] == 55

    def test_created_member_logs_userid(self, service):
        with patch("member_service.services.member_service.logger") as logger:
            record = service.create_member(make_member())
        extra = logger.info.call_args.kwargs["extra"]
        assert extra["userid"] == record.user_id
        assert extra["username"] == "abc"
