from types import MappingProxyType
from typing import Literal, Mapping

CONTINUE = 100
"""#### The server received the request headers and the client should proceed to send the body."""

SWITCHING_PROTOCOLS = 101
"""#### The server is switching protocols as requested by the client."""

PROCESSING = 102
"""#### The server has received and is processing the request, but no response is available yet (WebDAV)."""

OK = 200
"""#### The request has succeeded."""

CREATED = 201
"""#### The request has been fulfilled and a new resource has been created."""

ACCEPTED = 202
"""#### The request has been accepted for processing, but the processing has not been completed."""

NON_AUTHORITATIVE_INFORMATION = 203
"""#### The request succeeded, but the returned meta-information comes from a transforming proxy."""

NO_CONTENT = 204
"""#### The server successfully processed the request and is not returning any content."""

RESET_CONTENT = 205
"""#### The request succeeded and the client should reset the document view."""

PARTIAL_CONTENT = 206
"""#### The server is delivering only part of the resource due to a range header sent by the client."""

MULTI_STATUS = 207
"""#### The body is an XML message carrying separate status codes for multiple sub-requests (WebDAV)."""

ALREADY_REPORTED = 208
"""#### The members of a DAV binding have already been enumerated in a previous reply."""

IM_USED = 209
"""#### The response is a representation of one or more instance-manipulations applied to the current instance."""

MULTIPLE_CHOICES = 300
"""#### Indicates multiple options for the resource that the client may follow."""

MOVED_PERMANENTLY = 301
"""#### This and all future requests should be directed to the given URI."""

FOUND = 302
"""#### The requested resource resides temporarily under a different URI."""

SEE_OTHER = 303
"""#### The response can be found under another URI using a GET method."""

NOT_MODIFIED = 304
"""#### The resource has not been modified since the version specified by the request headers."""

USE_PROXY = 305
"""#### The requested resource is only available through the proxy given in the response."""

SWITCH_PROXY = 306
"""#### No longer used. Originally meant subsequent requests should use the specified proxy."""

TEMPORARY_REDIRECT = 307
"""#### Repeat the request with another URI, keeping the method; future requests use the original URI."""

PERMANENT_REDIRECT = 308
"""#### This and all future requests should be repeated using another URI, keeping the method."""

BAD_REQUEST = 400
"""#### The server cannot or will not process the request due to a perceived client error."""

UNAUTHORIZED = 401
"""#### Authentication is required and has failed or has not yet been provided."""

PAYMENT_REQUIRED = 402
"""#### Reserved for future use; originally intended for digital payment schemes."""

FORBIDDEN = 403
"""#### The request was valid, but the server is refusing to respond to it."""

NOT_FOUND = 404
"""#### The requested resource could not be found but may be available in the future."""

METHOD_NOT_ALLOWED = 405
"""#### The request method is not supported by the target resource."""

NOT_ACCEPTABLE = 406
"""#### The resource cannot generate content acceptable according to the request's Accept headers."""

PROXY_AUTHENTICATION_REQUIRED = 407
"""#### The client must first authenticate itself with the proxy."""

REQUEST_TIMEOUT = 408
"""#### The server timed out waiting for the request."""

CONFLICT = 409
"""#### The request conflicts with the current state of the resource, e.g. an edit conflict."""

GONE = 410
"""#### The resource is no longer available and will not be available again."""

LENGTH_REQUIRED = 411
"""#### The request did not specify the length of its content, which the resource requires."""

PRECONDITION_FAILED = 412
"""#### The server does not meet one of the preconditions the requester put on the request."""

REQUEST_ENTITY_TOO_LARGE = 413
"""#### The request is larger than the server is willing or able to process."""

REQUEST_URI_TOO_LONG = 414
"""#### The URI provided was too long for the server to process."""

UNSUPPORTED_MEDIA_TYPE = 415
"""#### The request entity has a media type the server or resource does not support."""

REQUESTED_RANGE_NOT_SATISFIABLE = 416
"""#### The client asked for a portion of the resource that the server cannot supply."""

EXPECTATION_FAILED = 417
"""#### The server cannot meet the requirements of the Expect request-header field."""

I_AM_A_TEAPOT = 418
"""#### Defined in RFC 2324 as an April Fools' joke; not expected to be implemented by real servers."""

AUTHENTICATION_TIMEOUT = 419
"""#### Previously valid authentication has expired (non-standard)."""

METHOD_FAILURE = 420
"""#### Spring Framework: a method has failed."""

ENHANCE_YOUR_CALM = 420
"""#### Twitter Search and Trends API: the client is being rate limited."""

UNPROCESSABLE_ENTITY = 422
"""#### The request was well-formed but could not be followed due to semantic errors (WebDAV)."""

LOCKED = 423
"""#### The resource that is being accessed is locked (WebDAV)."""

FAILED_DEPENDENCY = 424
"""#### The request failed due to failure of a previous request (WebDAV)."""

UPGRADE_REQUIRED = 426
"""#### The client should switch to a different protocol given in the Upgrade header field."""

PRECONDITION_REQUIRED = 428
"""#### The origin server requires the request to be conditional."""

TOO_MANY_REQUESTS = 429
"""#### The user has sent too many requests in a given amount of time."""

REQUEST_HEADER_FIELDS_TOO_LARGE = 431
"""#### The server is unwilling to process the request because its header fields are too large."""

LOGIN_TIMEOUT = 440
"""#### Microsoft: the client's session has expired and must log in again."""

NO_RESPONSE = 444
"""#### Nginx: the server returned no information and closed the connection."""

RETRY_WITH = 449
"""#### Microsoft: the request should be retried after performing the appropriate action."""

BLOCKED_BY_WINDOWS_PARENTAL_CONTROLS = 450
"""#### Microsoft: Windows Parental Controls are blocking access to the requested page."""

UNAVAILABLE_FOR_LEGAL_REASONS = 451
"""#### Access to the resource is denied for legal reasons, e.g. censorship."""

REDIRECT = 451
"""#### Microsoft Exchange ActiveSync: a more efficient server is available for the client."""

REQUEST_HEADER_TOO_LARGE = 494
"""#### Nginx: the request header is too large."""

CERT_ERROR = 495
"""#### Nginx: the client supplied an invalid certificate."""

NO_CERT = 496
"""#### Nginx: the client did not provide a required certificate."""

HTTP_TO_HTTPS = 497
"""#### Nginx: a plain HTTP request was sent to the HTTPS port."""

TOKEN_EXPIRED = 498
"""#### Esri: the token has expired."""

TOKEN_INVALID = 498
"""#### Esri: the token is invalid."""

CLIENT_CLOSED_REQUEST = 499
"""#### Nginx: the client closed the connection while the server was processing the request."""

TOKEN_REQUIRED = 499
"""#### Esri: a token is required but was not submitted."""

INTERNAL_SERVER_ERROR = 500
"""#### A generic error message when an unexpected condition was encountered."""

NOT_IMPLEMENTED = 501
"""#### The server does not recognise the request method or lacks the ability to fulfil it."""

BAD_GATEWAY = 502
"""#### The server, acting as a gateway or proxy, received an invalid response from upstream."""

SERVICE_UNAVAILABLE = 503
"""#### The server is currently unavailable because it is overloaded or down for maintenance."""

GATEWAY_TIMEOUT = 504
"""#### The server, acting as a gateway or proxy, did not receive a timely response from upstream."""

HTTP_VERSION_NOT_SUPPORTED = 505
"""#### The server does not support the HTTP protocol version used in the request."""

VARIANT_ALSO_NEGOTIATES = 506
"""#### Transparent content negotiation for the request results in a circular reference."""

INSUFFICIENT_STORAGE = 507
"""#### The server is unable to store the representation needed to complete the request (WebDAV)."""

LOOP_DETECTED = 508
"""#### The server detected an infinite loop while processing the request (WebDAV)."""

BANDWIDTH_LIMIT_EXCEEDED = 509
"""#### Apache bw/limited extension: the server's bandwidth limit has been exceeded."""

NOT_EXTENDED = 510
"""#### Further extensions to the request are required for the server to fulfil it."""

NETWORK_AUTHENTICATION_REQUIRED = 511
"""#### The client needs to authenticate to gain network access."""

ORIGIN_ERROR = 520
"""#### CloudFlare: the origin server returned an unknown error."""

WEB_SERVER_IS_DOWN = 521
"""#### CloudFlare: the origin server refused the connection."""

CONNECTION_TIMED_OUT = 522
"""#### CloudFlare: the handshake with the origin server timed out."""

PROXY_DECLINED_REQUEST = 523
"""#### CloudFlare: the origin server could not be reached."""

A_TIMEOUT_OCCURRED = 524
"""#### CloudFlare: a connection was made but the origin did not reply in time."""

NETWORK_READ_TIMEOUT_ERROR = 598
"""#### Used by some proxies to signal a network read timeout behind the proxy."""

NETWORK_CONNECT_TIMEOUT_ERROR = 599
"""#### Used by some proxies to signal a network connect timeout behind the proxy."""

# fmt: off
Status = Literal[
    100, 101, 102,
    200, 201, 202, 203, 204, 205, 206, 207, 208, 209,
    300, 301, 302, 303, 304, 305, 306, 307, 308,
    400, 401, 402, 403, 404, 405, 406, 407, 408, 409,
    410, 411, 412, 413, 414, 415, 416, 417, 418, 419,
    420, 422, 423, 424, 426, 428, 429, 431,
    440, 444, 449, 450, 451, 494, 495, 496, 497, 498, 499,
    500, 501, 502, 503, 504, 505, 506, 507, 508, 509, 510, 511,
    520, 521, 522, 523, 524, 598, 599,
]
# fmt: on
""" ### Every HTTP status code known to the registry"""


STATUS_CODE: Mapping[str, Status] = MappingProxyType(
    {
        "CONTINUE": CONTINUE,
        "SWITCHING_PROTOCOLS": SWITCHING_PROTOCOLS,
        "PROCESSING": PROCESSING,
        "OK": OK,
        "CREATED": CREATED,
        "ACCEPTED": ACCEPTED,
        "NON_AUTHORITATIVE_INFORMATION": NON_AUTHORITATIVE_INFORMATION,
        "NO_CONTENT": NO_CONTENT,
        "RESET_CONTENT": RESET_CONTENT,
        "PARTIAL_CONTENT": PARTIAL_CONTENT,
        "MULTI_STATUS": MULTI_STATUS,
        "ALREADY_REPORTED": ALREADY_REPORTED,
        "IM_USED": IM_USED,
        "MULTIPLE_CHOICES": MULTIPLE_CHOICES,
        "MOVED_PERMANENTLY": MOVED_PERMANENTLY,
        "FOUND": FOUND,
        "SEE_OTHER": SEE_OTHER,
        "NOT_MODIFIED": NOT_MODIFIED,
        "USE_PROXY": USE_PROXY,
        "SWITCH_PROXY": SWITCH_PROXY,
        "TEMPORARY_REDIRECT": TEMPORARY_REDIRECT,
        "PERMANENT_REDIRECT": PERMANENT_REDIRECT,
        "BAD_REQUEST": BAD_REQUEST,
        "UNAUTHORIZED": UNAUTHORIZED,
        "PAYMENT_REQUIRED": PAYMENT_REQUIRED,
        "FORBIDDEN": FORBIDDEN,
        "NOT_FOUND": NOT_FOUND,
        "METHOD_NOT_ALLOWED": METHOD_NOT_ALLOWED,
        "NOT_ACCEPTABLE": NOT_ACCEPTABLE,
        "PROXY_AUTHENTICATION_REQUIRED": PROXY_AUTHENTICATION_REQUIRED,
        "REQUEST_TIMEOUT": REQUEST_TIMEOUT,
        "CONFLICT": CONFLICT,
        "GONE": GONE,
        "LENGTH_REQUIRED": LENGTH_REQUIRED,
        "PRECONDITION_FAILED": PRECONDITION_FAILED,
        "REQUEST_ENTITY_TOO_LARGE": REQUEST_ENTITY_TOO_LARGE,
        "REQUEST_URI_TOO_LONG": REQUEST_URI_TOO_LONG,
        "UNSUPPORTED_MEDIA_TYPE": UNSUPPORTED_MEDIA_TYPE,
        "REQUESTED_RANGE_NOT_SATISFIABLE": REQUESTED_RANGE_NOT_SATISFIABLE,
        "EXPECTATION_FAILED": EXPECTATION_FAILED,
        "I_AM_A_TEAPOT": I_AM_A_TEAPOT,
        "AUTHENTICATION_TIMEOUT": AUTHENTICATION_TIMEOUT,
        "METHOD_FAILURE": METHOD_FAILURE,
        "ENHANCE_YOUR_CALM": ENHANCE_YOUR_CALM,
        "UNPROCESSABLE_ENTITY": UNPROCESSABLE_ENTITY,
        "LOCKED": LOCKED,
        "FAILED_DEPENDENCY": FAILED_DEPENDENCY,
        "UPGRADE_REQUIRED": UPGRADE_REQUIRED,
        "PRECONDITION_REQUIRED": PRECONDITION_REQUIRED,
        "TOO_MANY_REQUESTS": TOO_MANY_REQUESTS,
        "REQUEST_HEADER_FIELDS_TOO_LARGE": REQUEST_HEADER_FIELDS_TOO_LARGE,
        "LOGIN_TIMEOUT": LOGIN_TIMEOUT,
        "NO_RESPONSE": NO_RESPONSE,
        "RETRY_WITH": RETRY_WITH,
        "BLOCKED_BY_WINDOWS_PARENTAL_CONTROLS": BLOCKED_BY_WINDOWS_PARENTAL_CONTROLS,
        "UNAVAILABLE_FOR_LEGAL_REASONS": UNAVAILABLE_FOR_LEGAL_REASONS,
        "REDIRECT": REDIRECT,
        "REQUEST_HEADER_TOO_LARGE": REQUEST_HEADER_TOO_LARGE,
        "CERT_ERROR": CERT_ERROR,
        "NO_CERT": NO_CERT,
        "HTTP_TO_HTTPS": HTTP_TO_HTTPS,
        "TOKEN_EXPIRED": TOKEN_EXPIRED,
        "TOKEN_INVALID": TOKEN_INVALID,
        "CLIENT_CLOSED_REQUEST": CLIENT_CLOSED_REQUEST,
        "TOKEN_REQUIRED": TOKEN_REQUIRED,
        "INTERNAL_SERVER_ERROR": INTERNAL_SERVER_ERROR,
        "NOT_IMPLEMENTED": NOT_IMPLEMENTED,
        "BAD_GATEWAY": BAD_GATEWAY,
        "SERVICE_UNAVAILABLE": SERVICE_UNAVAILABLE,
        "GATEWAY_TIMEOUT": GATEWAY_TIMEOUT,
        "HTTP_VERSION_NOT_SUPPORTED": HTTP_VERSION_NOT_SUPPORTED,
        "VARIANT_ALSO_NEGOTIATES": VARIANT_ALSO_NEGOTIATES,
        "INSUFFICIENT_STORAGE": INSUFFICIENT_STORAGE,
        "LOOP_DETECTED": LOOP_DETECTED,
        "BANDWIDTH_LIMIT_EXCEEDED": BANDWIDTH_LIMIT_EXCEEDED,
        "NOT_EXTENDED": NOT_EXTENDED,
        "NETWORK_AUTHENTICATION_REQUIRED": NETWORK_AUTHENTICATION_REQUIRED,
        "ORIGIN_ERROR": ORIGIN_ERROR,
        "WEB_SERVER_IS_DOWN": WEB_SERVER_IS_DOWN,
        "CONNECTION_TIMED_OUT": CONNECTION_TIMED_OUT,
        "PROXY_DECLINED_REQUEST": PROXY_DECLINED_REQUEST,
        "A_TIMEOUT_OCCURRED": A_TIMEOUT_OCCURRED,
        "NETWORK_READ_TIMEOUT_ERROR": NETWORK_READ_TIMEOUT_ERROR,
        "NETWORK_CONNECT_TIMEOUT_ERROR": NETWORK_CONNECT_TIMEOUT_ERROR,
    }
)  # type: ignore
"symbolic name -> code, several names may share one code"


STATUS_TEXT: Mapping[Status, str] = MappingProxyType(
    {
        100: "Continue",
        101: "Switching Protocols",
        102: "Processing",
        200: "OK",
        201: "Created",
        202: "Accepted",
        203: "Non-Authoritative Information",
        204: "No Content",
        205: "Reset Content",
        206: "Partial Content",
        207: "Multi-Status",
        208: "Already Reported",
        209: "IM Used",
        300: "Multiple Choices",
        301: "Moved Permanently",
        302: "Found",
        303: "See Other",
        304: "Not Modified",
        305: "Use Proxy",
        306: "Switch Proxy",
        307: "Temporary Redirect",
        308: "Permanent Redirect",
        400: "Bad Request",
        401: "Unauthorized",
        402: "Payment Required",
        403: "Forbidden",
        404: "Not Found",
        405: "Method Not Allowed",
        406: "Not Acceptable",
        407: "Proxy Authentication Required",
        408: "Request Timeout",
        409: "Conflict",
        410: "Gone",
        411: "Length Required",
        412: "Precondition Failed",
        413: "Request Entity Too Large",
        414: "Request-URI Too Long",
        415: "Unsupported Media Type",
        416: "Requested Range Not Satisfiable",
        417: "Expectation Failed",
        418: "I'm a teapot",
        419: "Authentication Timeout",
        420: "Method Failure (Spring Framework) / Enhance Your Calm (Twitter)",
        422: "Unprocessable Entity",
        423: "Locked",
        424: "Failed Dependency",
        426: "Upgrade Required",
        428: "Precondition Required",
        429: "Too Many Requests",
        431: "Request Header Fields Too Large",
        440: "Login Timeout (Microsoft)",
        444: "No Response (Nginx)",
        449: "Retry With (Microsoft)",
        450: "Blocked by Windows Parental Controls (Microsoft)",
        451: "Unavailable For Legal Reasons / Redirect (Microsoft)",
        494: "Request Header Too Large (Nginx)",
        495: "Cert Error (Nginx)",
        496: "No Cert (Nginx)",
        497: "HTTP to HTTPS (Nginx)",
        498: "Token expired/invalid (Esri)",
        499: "Client Closed Request (Nginx) / Token required (Esri)",
        500: "Internal Server Error",
        501: "Not Implemented",
        502: "Bad Gateway",
        503: "Service Unavailable",
        504: "Gateway Timeout",
        505: "HTTP Version Not Supported",
        506: "Variant Also Negotiates",
        507: "Insufficient Storage",
        508: "Loop Detected",
        509: "Bandwidth Limit Exceeded (Apache bw/limited extension)",
        510: "Not Extended",
        511: "Network Authentication Required",
        520: "Origin Error (CloudFlare)",
        521: "Web server is down (CloudFlare)",
        522: "Connection timed out (CloudFlare)",
        523: "Proxy Declined Request (CloudFlare)",
        524: "A timeout occurred (CloudFlare)",
        598: "Network read timeout error (Unknown)",
        599: "Network connect timeout error (Unknown)",
    }
)
"code -> reason phrase"
