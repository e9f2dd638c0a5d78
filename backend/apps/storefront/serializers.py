from rest_framework import serializers

from .domains import supported_locales


class MetadataQuerySerializer(serializers.Serializer):
    """Parametros para construir metadata SEO de una pagina"""
    locale = serializers.ChoiceField(choices=[])
    pathname = serializers.CharField(max_length=2048)
    title = serializers.CharField(required=False, max_length=200)
    description = serializers.CharField(required=False, max_length=500)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Idiomas tomados de settings al momento del request
        self.fields['locale'].choices = supported_locales()

    def validate_pathname(self, value):
        # El canonical siempre se construye con una ruta absoluta
        if not value.startswith('/'):
            value = f'/{value}'
        return value


class PageSerializer(serializers.Serializer):
    """Descriptor de pagina consumido por el front end React"""
    component = serializers.CharField()
    props = serializers.DictField()
    metadata = serializers.DictField()
