"""
Exceções de Domínio do Employee Manager.

Falhas esperadas (validação, duplicidade, registro inexistente) são
propagadas via Result (ver result.py). As exceções abaixo sinalizam
violações de invariantes e uso incorreto do domínio, e são traduzidas
para respostas HTTP pela camada de API.

Hierarquia:
    DomainException (base)
    └── BusinessRuleViolationError (regra de negócio violada)
"""


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Example:
        try:
            total = salario.add(bonus)
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class BusinessRuleViolationError(DomainException):
    """
    Violação de regra de negócio.

    Example:
        if self.currency != other.currency:
            raise BusinessRuleViolationError(
                "Não é possível adicionar valores em moedas diferentes",
                rule="Money.CurrencyMismatch",
            )
    """

    def __init__(self, message: str, rule: str = None):
        self.rule = rule
        super().__init__(message, "BUSINESS_RULE_VIOLATION")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.rule:
            result["rule"] = self.rule
        return result
