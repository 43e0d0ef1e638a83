from __future__ import annotations

AUTH_SCHEME = "Splunk"

ENV_TOKEN = "SPLUNK_HEC_TOKEN"
ENV_URL = "SPLUNK_HEC_URL"
ENV_LOG_FORMAT = "SPLUNK_HEC_LOG_FORMAT"

SUCCESS_STATUS = 200
