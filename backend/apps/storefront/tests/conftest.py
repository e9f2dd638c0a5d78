# backend/apps/storefront/tests/conftest.py
import pytest
from django.test import RequestFactory
from rest_framework.test import APIClient

SPANISH_HOST = 'artehechoamano.com'
ENGLISH_HOST = 'handmadeart.store'


@pytest.fixture
def api_client():
    """Cliente API para las pruebas"""
    return APIClient()


@pytest.fixture
def request_factory():
    """Factory para crear requests"""
    return RequestFactory()


@pytest.fixture
def spanish_host():
    return SPANISH_HOST


@pytest.fixture
def english_host():
    return ENGLISH_HOST


@pytest.fixture
def three_domain_rules(settings):
    """Agrega un tercer dominio (fr) sin tocar el codigo de ruteo"""
    settings.STOREFRONT = {
        **settings.STOREFRONT,
        'DOMAINS': settings.STOREFRONT['DOMAINS'] + [
            {
                'fragment': 'artfaitmain',
                'locale': 'fr',
                'domain': 'artfaitmain.fr',
                'region': 'FR',
            },
        ],
    }
    return settings.STOREFRONT['DOMAINS']
