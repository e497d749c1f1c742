from __future__ import annotations


class DomainError(Exception):
    """Base para erros de dominio."""


class ContractTagsError(DomainError):
    """Falha ao montar as tags de contrato."""


class UnsupportedChainError(ContractTagsError):
    def __init__(self, chain_id: str, supported_chain_ids: tuple[str, ...]):
        self.chain_id = chain_id
        self.supported_chain_ids = supported_chain_ids
        super().__init__(
            f"Unsupported chain id: {chain_id!r}. "
            f"Supported chain ids: {', '.join(supported_chain_ids)}"
        )


class SubgraphNotConfiguredError(ContractTagsError):
    """Chain suportada sem subgraph configurado."""


class TransportError(ContractTagsError):
    """Resposta HTTP sem sucesso do subgraph."""


class QueryError(ContractTagsError):
    """Subgraph retornou erros na consulta GraphQL."""

    def __init__(self, messages: list[str]):
        self.messages = messages
        super().__init__(" | ".join(messages))


class MalformedResponseError(ContractTagsError):
    """Resposta fora do formato esperado."""


class ReturnTagsError(ContractTagsError):
    """Falha geral de return_tags, embrulhando a causa original."""

    def __init__(self, chain_id: str, cause: ContractTagsError):
        self.chain_id = chain_id
        self.cause = cause
        super().__init__(f"Failed to build contract tags for chain {chain_id}: {cause}")
