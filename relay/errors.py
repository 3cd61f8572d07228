class RelayError(Exception):
    """Erro base do relay."""


class MalformedPayload(RelayError):
    """Corpo da requisição não é um JSON válido."""


class UnrecognizedPayload(RelayError):
    """JSON válido, mas não corresponde a nenhum formato conhecido."""


class ConfigurationError(RelayError):
    """Configuração de ambiente ausente ou inválida."""
