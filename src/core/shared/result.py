"""
Result - Propagação explícita de sucesso/falha.

Falhas esperadas (validação, duplicidade, registro inexistente) não
lançam exceções: retornam um Result com a lista de erros. Exceções
ficam reservadas para violações de invariantes e erros de programação.

Example:
    result = Email.create("joao@empresa.com")
    if result.is_failure:
        return Result.fail(result.errors)
    email = result.value
"""

from dataclasses import dataclass
from typing import Any, Generic, Iterable, List, Optional, Tuple, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Error:
    """
    Descritor imutável de erro.

    Attributes:
        code: Código estável do erro (ex: "Email.Empty", "NotEmpty")
        message: Mensagem legível (pt-BR)
        field: Campo de origem, quando o erro vem de validação
    """

    code: str
    message: str
    field: Optional[str] = None

    def to_dict(self) -> dict:
        result = {"code": self.code, "message": self.message}
        if self.field:
            result["field"] = self.field
        return result

    def __str__(self) -> str:
        return self.message


class Result(Generic[T]):
    """
    Resultado de uma operação que pode falhar.

    Use as factories `Result.ok` e `Result.fail` em vez do construtor.

    Attributes:
        is_success: True se a operação foi bem sucedida
        is_failure: Inverso de is_success
        errors: Erros da falha (vazio em caso de sucesso)
    """

    __slots__ = ("_is_success", "_value", "_errors")

    def __init__(self, is_success: bool, value: Optional[T], errors: Tuple[Error, ...]):
        if is_success and errors:
            raise ValueError("Resultado de sucesso não pode conter erros")
        if not is_success and not errors:
            raise ValueError("Resultado de falha deve conter ao menos um erro")
        self._is_success = is_success
        self._value = value
        self._errors = errors

    @classmethod
    def ok(cls, value: Optional[T] = None) -> "Result[T]":
        """Cria resultado de sucesso (com valor opcional)."""
        return cls(True, value, ())

    @classmethod
    def fail(cls, *errors: Union[Error, str, Iterable[Error]]) -> "Result[T]":
        """
        Cria resultado de falha.

        Formas aceitas:
            Result.fail(Error("X", "msg"))
            Result.fail([erro1, erro2])
            Result.fail("Codigo", "Mensagem")
            Result.fail("Mensagem")  # código genérico "Error"
        """
        return cls(False, None, _normalize_errors(errors))

    @property
    def is_success(self) -> bool:
        return self._is_success

    @property
    def is_failure(self) -> bool:
        return not self._is_success

    @property
    def errors(self) -> Tuple[Error, ...]:
        return self._errors

    @property
    def value(self) -> T:
        """
        Valor do resultado de sucesso.

        Raises:
            ValueError: Se acessado em resultado de falha
        """
        if self.is_failure:
            raise ValueError("Não é possível acessar o valor de um resultado com falha")
        return self._value

    @property
    def error_messages(self) -> List[str]:
        """Mensagens dos erros (formato usado nas respostas HTTP)."""
        return [error.message for error in self._errors]

    def has_error(self, code: str) -> bool:
        """Verifica se algum erro possui o código informado."""
        return any(error.code == code for error in self._errors)

    def __bool__(self) -> bool:
        return self._is_success

    def __repr__(self) -> str:
        if self.is_success:
            return f"Result.ok({self._value!r})"
        codes = ", ".join(error.code for error in self._errors)
        return f"Result.fail({codes})"


def _normalize_errors(args: Tuple[Any, ...]) -> Tuple[Error, ...]:
    # ("Codigo", "Mensagem")
    if len(args) == 2 and all(isinstance(arg, str) for arg in args):
        return (Error(code=args[0], message=args[1]),)

    errors: List[Error] = []
    for arg in args:
        if isinstance(arg, (Error, str)):
            errors.append(_to_error(arg))
        else:
            errors.extend(_to_error(item) for item in arg)
    return tuple(errors)


def _to_error(item: Union[Error, str]) -> Error:
    if isinstance(item, Error):
        return item
    return Error(code="Error", message=item)
