"""Turns a site identifier into the text that gets hashed.

Parsing follows PasswordMaker Pro rather than the URI standard, so a bare
"www.example.com" without a scheme is a valid site.
"""

from passmaker.entities import ProtocolUsage, Profile, SubdomainPolicy, UrlParts
from passmaker.errors import ValidationError


def parse_url(site: str) -> UrlParts:
    protocol, colon, rest = site.partition(":")
    has_protocol = bool(colon)
    if not has_protocol:
        protocol, rest = "", site

    has_authority = rest.startswith("//")
    if has_authority:
        rest = rest[2:]

    # with a protocol but no authority marker, everything after ':' is path
    if has_protocol and not has_authority:
        authority, path = "", rest
    else:
        slash = rest.find("/")
        authority, path = (rest, "") if slash < 0 else (rest[:slash], rest[slash:])

    # split at '@' first, otherwise ':' is ambiguous
    userinfo, at, host_and_port = authority.partition("@")
    if not at:
        userinfo, host_and_port = "", authority
    address, _, port = host_and_port.partition(":")

    # the domain is the last two labels, anything before is subdomain
    first_dot = address.rfind(".")
    second_dot = address.rfind(".", 0, first_dot) if first_dot > 0 else -1
    if second_dot >= 0:
        subdomain, domain = address[:second_dot], address[second_dot + 1 :]
    else:
        subdomain, domain = "", address.removeprefix(".")

    return UrlParts(
        protocol=protocol,
        userinfo=userinfo,
        subdomain=subdomain,
        domain=domain,
        port=port,
        path=path,
    )


def filter_parts(parts: UrlParts, profile: Profile) -> tuple[str, UrlParts]:
    """Drop the URL components the profile does not use.

    Returns the protocol separator and the remaining parts.
    """
    protocol_used = profile.use_protocol != ProtocolUsage.IGNORED
    has_protocol = protocol_used and bool(parts.protocol)
    if has_protocol:
        protocol = parts.protocol
    elif profile.use_protocol == ProtocolUsage.USED_WITH_UNDEFINED:
        protocol = "undefined"
    else:
        protocol = ""

    match profile.subdomain_policy:
        case SubdomainPolicy.FULL:
            subdomain = parts.subdomain
        case SubdomainPolicy.ONE_LEVEL:
            subdomain = parts.subdomain.rpartition(".")[2]
        case SubdomainPolicy.DOMAIN_ONLY:
            subdomain = ""
        case _:
            raise ValueError(f"Unknown subdomain policy: {profile.subdomain_policy}")

    filtered = UrlParts(
        protocol=protocol,
        userinfo=parts.userinfo if profile.use_userinfo else "",
        subdomain=subdomain,
        domain=parts.domain,
        port=parts.port if profile.use_port_path else "",
        path=parts.path if profile.use_port_path else "",
    )
    return "://" if has_protocol else "", filtered


def recombine(parts: UrlParts, protocol_separator: str) -> str:
    has_userinfo = bool(parts.userinfo)
    has_subdomain = bool(parts.subdomain)
    has_domain = bool(parts.domain)
    has_port = bool(parts.port)
    has_path = bool(parts.path)

    pieces = [
        parts.protocol,
        protocol_separator,
        parts.userinfo,
        "@" if has_userinfo and (has_domain or has_subdomain or has_port or has_path) else "",
        parts.subdomain,
        "." if has_subdomain and has_domain else "",
        parts.domain,
        ":" if has_port and (has_userinfo or has_domain or has_subdomain) else "",
        parts.port,
        parts.path,
    ]
    return "".join(pieces)


def used_text(site: str, profile: Profile) -> str:
    parts = parse_url(site)
    if not parts.domain:
        raise ValidationError(
            "site", f"Could not extract a domain from site identifier {site!r}"
        )
    separator, filtered = filter_parts(parts, profile)
    return recombine(filtered, separator)


def assemble_text(site: str, username: str, modifier: str, profile: Profile) -> str:
    """Canonical text-to-hash: used URL text, then username, then modifier."""
    return used_text(site, profile) + username + modifier
