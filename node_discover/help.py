"""Usage text for the argument string and each provider."""

from __future__ import annotations

from node_discover.args import ProviderKind
from node_discover.providers.aws import AWSProvider
from node_discover.providers.digitalocean import DOProvider

GLOBAL_HELP = """\
The options for discovering ip addresses are provided as a
single string value in "key=value key=value ..." format.

  provider=aws region=eu-west-1 ...

The options are provider specific and are listed below.
"""


def provider_help(kind: ProviderKind) -> str:
    match kind:
        case ProviderKind.AWS:
            return AWSProvider.help()
        case ProviderKind.DIGITALOCEAN:
            return DOProvider.help()


def help_text(provider: str | None = None) -> str:
    """Global help followed by the help of ``provider``.

    Every provider is listed when ``provider`` is None or unknown.
    """
    try:
        kinds = [ProviderKind(provider)] if provider else list(ProviderKind)
    except ValueError:
        kinds = list(ProviderKind)
    return "\n".join([GLOBAL_HELP, *(provider_help(kind) for kind in kinds)])
