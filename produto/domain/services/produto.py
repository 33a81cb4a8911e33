"""Produto service.

Validates Produto input and orchestrates calls into ProdutoRepository.

Validation order is fixed and short-circuits on the first failure:

    produto is None        → NullArgumentError
    nome None or blank     → InvalidArgumentError
    preco not > 0 (or NaN) → InvalidArgumentError
    id not in repository   → InvalidOperationError  (update / delete only)

No repository mutation happens unless every check passes.
"""

from __future__ import annotations

import logging

from produto.domain.errors import (
    InvalidArgumentError,
    InvalidOperationError,
    NullArgumentError,
)
from produto.domain.models.produto import Produto
from produto.domain.repositories.produto import ProdutoRepository

logger = logging.getLogger(__name__)

MSG_PRODUTO_NULO = "O produto não pode ser nulo."
MSG_NOME_INVALIDO = "O nome do produto não pode ser nulo ou vazio."
MSG_PRECO_INVALIDO = "O preço do produto deve ser maior que zero."
MSG_ATUALIZAR_INEXISTENTE = "Não é possível atualizar um produto inexistente."
MSG_EXCLUIR_INEXISTENTE = "Não é possível excluir um produto inexistente."


class ProdutoService:
    """Business-rule layer in front of a ProdutoRepository.

    The service owns no storage; it holds only the repository it delegates
    to.  Errors propagate to the caller unchanged.
    """

    def __init__(self, repository: ProdutoRepository) -> None:
        self._repository = repository

    # ------------------------------------------------------------------ #
    # Queries                                                              #
    # ------------------------------------------------------------------ #

    def get_produto(self, id: int) -> Produto | None:
        """Return the produto with the given id, or None if absent."""
        return self._repository.get_by_id(id)

    def obter_todos_produtos(self) -> list[Produto]:
        """Return the repository's collection as-is."""
        return self._repository.get_all()

    # ------------------------------------------------------------------ #
    # Commands                                                             #
    # ------------------------------------------------------------------ #

    def salvar_produto(self, produto: Produto | None) -> None:
        """Validate and persist a new produto.

        Raises:
            NullArgumentError: produto is None.
            InvalidArgumentError: nome is missing/blank or preco is not > 0.
        """
        self._validar(produto)
        self._repository.save(produto)
        logger.info("Produto %s salvo.", produto.id)

    def atualizar_produto(self, produto: Produto | None) -> None:
        """Validate and persist changes to an existing produto.

        Raises:
            NullArgumentError: produto is None.
            InvalidArgumentError: nome is missing/blank or preco is not > 0.
            InvalidOperationError: no produto with produto.id exists.
        """
        self._validar(produto)
        if not self._existe(produto.id):
            logger.warning("Atualização recusada: produto %s inexistente.", produto.id)
            raise InvalidOperationError(MSG_ATUALIZAR_INEXISTENTE)
        self._repository.update(produto)
        logger.info("Produto %s atualizado.", produto.id)

    def excluir_produto(self, id: int) -> None:
        """Remove an existing produto.

        Raises:
            InvalidOperationError: no produto with this id exists.
        """
        if not self._existe(id):
            logger.warning("Exclusão recusada: produto %s inexistente.", id)
            raise InvalidOperationError(MSG_EXCLUIR_INEXISTENTE)
        self._repository.delete(id)
        logger.info("Produto %s excluído.", id)

    # ------------------------------------------------------------------ #
    # Private helpers                                                      #
    # ------------------------------------------------------------------ #

    def _existe(self, id: int) -> bool:
        return self._repository.get_by_id(id) is not None

    @staticmethod
    def _validar(produto: Produto | None) -> None:
        if produto is None:
            logger.warning("Produto rejeitado: nulo.")
            raise NullArgumentError(MSG_PRODUTO_NULO)
        if produto.nome is None or not produto.nome.strip():
            logger.warning("Produto %s rejeitado: nome vazio.", produto.id)
            raise InvalidArgumentError(MSG_NOME_INVALIDO)
        if not produto.preco > 0:
            logger.warning("Produto %s rejeitado: preço %s.", produto.id, produto.preco)
            raise InvalidArgumentError(MSG_PRECO_INVALIDO)
