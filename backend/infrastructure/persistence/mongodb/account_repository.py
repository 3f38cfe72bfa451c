"""MongoDB implementation of IAccountRepository."""

from typing import Any, Dict, Optional

from domain.account.core.entities.account import Account
from domain.account.core.ports.account_repository import IAccountRepository
from domain.account.core.value_objects.email import Email
from domain.account.core.value_objects.role import AccountStatus, Role

from .base import MongoBaseRepository


class MongoAccountRepository(
    MongoBaseRepository[Account],
    IAccountRepository,
):
    """MongoDB implementation of the account repository.

    Email is stored normalized and queried by exact match.
    """

    @property
    def collection_name(self) -> str:
        return "accounts"

    def to_document(self, entity: Account) -> Dict[str, Any]:
        return {
            "_id": entity.account_id,
            "email": entity.email.value,
            "password": entity.password,
            "role": entity.role.value,
            "admin_access": entity.admin_access,
            "is_super_admin": entity.is_super_admin,
            "account_status": entity.account_status.value,
            "created_at": entity.created_at,
            "updated_at": entity.updated_at,
        }

    def from_document(self, doc: Dict[str, Any]) -> Account:
        return Account(
            account_id=doc["_id"],
            email=Email(doc["email"]),
            password=doc["password"],
            role=Role(doc["role"]),
            admin_access=doc.get("admin_access", False),
            is_super_admin=doc.get("is_super_admin", False),
            account_status=AccountStatus(doc["account_status"]),
            created_at=doc["created_at"],
            updated_at=doc["updated_at"],
        )

    async def load_account(self, account_id: str) -> Optional[Account]:
        doc = await self._find_one({"_id": account_id})
        return self.from_document(doc) if doc else None

    async def save_account(self, account: Account) -> None:
        await self._replace_one({"_id": account.account_id}, self.to_document(account))

    async def find_by_email(self, email: Email) -> Optional[Account]:
        doc = await self._find_one({"email": email.value})
        return self.from_document(doc) if doc else None

    async def verify_credentials(self, account: Account, password: str) -> bool:
        doc = await self._find_one({"_id": account.account_id})
        return doc is not None and doc.get("password") == password

    async def list_accounts(self) -> list[Account]:
        docs = await self._find_many({}, sort=[("created_at", -1)])
        return [self.from_document(doc) for doc in docs]
