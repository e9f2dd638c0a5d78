import re

from .domains import supported_locales


class LocaleConverter:
    """Segmento <locale:...> restringido a los idiomas configurados"""

    @property
    def regex(self):
        return '|'.join(re.escape(locale) for locale in supported_locales())

    def to_python(self, value):
        return value

    def to_url(self, value):
        return value
