# =============================================================================
# HANDMADE ART STOREFRONT: Host & Domain Resolution
# =============================================================================
# STATUS: Completo
# PURPOSE: Determinar host efectivo, idioma y dominio alterno por request
# BUSINESS LOGIC:
# - artehechoamano.com -> español, handmadeart.store -> inglés
# - Cualquier otro host (localhost, previews) -> idioma por defecto
# NEXT STEPS: Ninguno; nuevos dominios se agregan en settings.STOREFRONT
# =============================================================================

from collections import namedtuple

from django.conf import settings
from django.db import models


class Locale(models.TextChoices):
    ES = 'es', 'Español'
    EN = 'en', 'English'


DomainRule = namedtuple('DomainRule', ['fragment', 'locale', 'domain', 'region'])

# Par (idioma actual, regla alterna) usado por robots.txt y sitemap.xml
Counterpart = namedtuple('Counterpart', ['locale', 'alternate'])

# Orden de preferencia: el proxy define x-forwarded-host
HOST_HEADERS = ('x-forwarded-host', 'host')


def get_domain_rules():
    """Reglas ordenadas fragment -> locale definidas en settings"""
    return [DomainRule(**rule) for rule in settings.STOREFRONT['DOMAINS']]


def get_default_locale():
    return settings.STOREFRONT['DEFAULT_LOCALE']


def supported_locales(rules=None):
    """Locales configurados, sin repetir y en el orden de las reglas"""
    rules = get_domain_rules() if rules is None else rules
    locales = []
    for rule in rules:
        if rule.locale not in locales:
            locales.append(rule.locale)
    return locales


def resolve_host(headers, fallback=None):
    """
    Host efectivo del request.

    Recorre x-forwarded-host y luego host; cada candidato se recorta y gana
    el primero que no quede vacio. Nunca falla: sin candidatos devuelve el
    fallback configurado ('localhost').

    `headers` puede ser request.headers de Django o cualquier mapping; las
    claves se comparan sin distinguir mayusculas.
    """
    if fallback is None:
        fallback = settings.STOREFRONT['FALLBACK_HOST']

    normalized = {str(name).lower(): value for name, value in headers.items()}
    for name in HOST_HEADERS:
        candidate = (normalized.get(name) or '').strip()
        if candidate:
            return candidate
    return fallback


def match_rule(host, rules=None):
    """Primera regla cuyo fragment aparece en el host (case-sensitive)"""
    rules = get_domain_rules() if rules is None else rules
    for rule in rules:
        if rule.fragment in host:
            return rule
    return None


def classify_locale(host, rules=None, default=None):
    """
    Idioma para un host. Funcion total: si ninguna regla coincide
    (otro dominio, desarrollo local, host vacio) devuelve el default.
    """
    rule = match_rule(host, rules)
    if rule is not None:
        return rule.locale
    return get_default_locale() if default is None else default


def canonical_domain(locale, rules=None):
    """Dominio canonico de produccion asociado a un idioma"""
    rules = get_domain_rules() if rules is None else rules
    for rule in rules:
        if rule.locale == locale:
            return rule.domain
    return None


def counterpart(host, rules=None):
    """
    Idioma del host y regla del dominio alterno para SEO bi-dominio.

    Un host que no coincide con ninguna regla se empareja con la primera
    regla como alterna (artehechoamano.com), y se trata con el primer
    idioma distinto al de esa regla.
    """
    rules = get_domain_rules() if rules is None else rules
    current = match_rule(host, rules)

    if current is None:
        alternate = rules[0]
        locale = next(
            (rule.locale for rule in rules if rule.locale != alternate.locale),
            alternate.locale,
        )
        return Counterpart(locale, alternate)

    alternate = next(
        (rule for rule in rules if rule.locale != current.locale),
        current,
    )
    return Counterpart(current.locale, alternate)
