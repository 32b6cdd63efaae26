from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorCatalog:
    """Candidate error statuses and bodies.

    The two tuples are sampled independently, so any status can pair with any
    detail.
    """

    status_codes: tuple[int, ...]
    details: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.status_codes or not self.details:
            raise ValueError("error catalog needs at least one status code and one detail")


# Bodies captured from real postback/attribution integrations; they are noise
# for the client to cope with, not a taxonomy.
DEFAULT_ERROR_CATALOG = ErrorCatalog(
    status_codes=(400, 500, 502, 503, 504),
    details=(
        "Event postback is disabled due to Facebook re-engagement being enabled",
        'PostbackTypeNotSupported: Integration doesn\'t support this Postback type ("session"). '
        "Please contact your Kochava Account Management team.",
        "",
        "{\"error\":{\"message\":\"(#100) At least one of the parameter 'attribution', 'advertiser_id', "
        "'anon_id', 'page_scoped_user_id', 'user_id_type' or 'ud' is required for the 'custom_app_e",
        '{"error":{"message":"(#4) Application request limit reached","type":"OAuthException",'
        '"is_transient":true,"code":4,"',
        '{"status":400,"error":"Bad Request","errors":[{"codes":["typeMismatch.postBackBean.ctawindow",'
        '"typeMismatch.ctawindow","typeMismatch.java',
        "Empty device id.",
        "Error: Doubleclick only supports adid and idfa identifiers, neither found.",
        '{"num_events_processed":1,"num_events_received":1,"events":[{"status":"processed",'
        '"error_message":"","warning_message":""}]}',
        "Error: Is Not Allowed Network, Apple Ads",
        'PostbackTypeNotSupported: Integration doesn\'t support this Postback type ("click"). '
        "Please contact your Kochava Account Management team.",
        "Missing delivery URL",
        '"EventTypeNotSupported: Integration doesn\'t support the Event type: "". '
        'Please contact your Kochava Account Management team."',
        "Error: Invalid postback type: event",
        '{"errors":["no IDFA, GAID, or GUM data found"],"warnings":[]}',
        '{"statusCode":422,"success":false}',
        "Error: getaddrinfo ENOTFOUND odm-postback.pinsightmedia.com odm-postback.pinsightmedia.com:443",
        '{"errors":["The request doesn\'t contain any event"],"warnings":[]}',
        "user_id Decryption Failed",
    ),
)
