# =============================================================================
# HANDMADE ART STOREFRONT: robots.txt & sitemap.xml
# =============================================================================
# STATUS: Completo
# PURPOSE: Declarar ambos sitemaps (dominio actual + alterno) para SEO bi-dominio
# BUSINESS LOGIC: robots y sitemap usan el mismo emparejamiento de dominios
# NEXT STEPS: Agregar paginas de producto cuando el catalogo exponga un API
# =============================================================================

from django.conf import settings
from django.utils import timezone

from .domains import counterpart, get_domain_rules

# Paginas estaticas publicadas en ambos idiomas
STATIC_PATHS = [
    '',
    '/about',
    '/products',
    '/shipping',
    '/contact',
    '/privacy-policies',
    '/conditions-service',
    '/qr',
    '/account',
    '/feria-artesanias',
    '/feria-artesanias-terminos',
    '/fiestas-patronales-de-san-ramon',
    '/search',
    '/reinsercion-sociolaboral',
]


def sitemap_url(host):
    return f'https://{host}/sitemap.xml'


def robots_policy(host):
    """Politica de robots: permitir todo salvo rutas internas, dos sitemaps"""
    alternate = counterpart(host).alternate
    return {
        'rules': [
            {
                'user_agent': '*',
                'allow': '/',
                'disallow': list(settings.STOREFRONT['ROBOTS_DISALLOW']),
            },
        ],
        'sitemap': [
            sitemap_url(host),
            sitemap_url(alternate.domain),
        ],
    }


def render_robots(policy):
    lines = []
    for rule in policy['rules']:
        lines.append(f"User-Agent: {rule['user_agent']}")
        lines.append(f"Allow: {rule['allow']}")
        lines.extend(f'Disallow: {prefix}' for prefix in rule['disallow'])
        lines.append('')
    lines.extend(f'Sitemap: {url}' for url in policy['sitemap'])
    return '\n'.join(lines) + '\n'


def _hreflang(locale, rules):
    for rule in rules:
        if rule.locale == locale:
            return f'{rule.locale}-{rule.region}'.lower()
    return locale


def sitemap_entries(host, paths=None, now=None):
    """
    Entradas del sitemap para el host actual.

    Cada pagina apunta al idioma del host y declara su version alterna
    en el dominio canonico del otro idioma.
    """
    rules = get_domain_rules()
    pair = counterpart(host, rules)
    alternate = pair.alternate
    paths = STATIC_PATHS if paths is None else paths
    now = now or timezone.now()

    entries = []
    for path in paths:
        location = f'https://{host}/{pair.locale}{path}'
        entries.append({
            'location': location,
            'lastmod': now,
            'changefreq': 'monthly',
            # String para evitar formato localizado ("0,6") en el template
            'priority': '0.6',
            'alternates': [
                (_hreflang(pair.locale, rules), location),
                (
                    _hreflang(alternate.locale, rules),
                    f'https://{alternate.domain}/{alternate.locale}{path}',
                ),
            ],
        })
    return entries
