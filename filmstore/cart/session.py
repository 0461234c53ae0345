import logging
from typing import List, Optional

from ..api.client import APIClient
from ..api.exceptions import APIError, DecodingError, ServerError
from ..config.settings import settings
from ..utils.state import StateContainer
from .schemas import CartGroup, CartLine
from .service import cart_total, group_cart_lines


logger = logging.getLogger(__name__)


class CartSession:
    """Load, group and delete cycle of one user's cart.

    The backend is the source of truth: every mutation ends with a full
    reload, nothing is patched locally. Loads are not queued; a late
    response overwrites whatever an earlier one published.
    """

    def __init__(self, client: APIClient, user_name: Optional[str] = None):
        self.client = client
        self.user_name = user_name or settings.USER_NAME
        self.state: StateContainer[List[CartGroup]] = StateContainer(data=[])
        self.raw_lines: List[CartLine] = []

    @property
    def groups(self) -> List[CartGroup]:
        return self.state.data or []

    @property
    def error(self) -> Optional[str]:
        return self.state.error

    @property
    def is_empty(self) -> bool:
        return not self.groups

    @property
    def total(self) -> int:
        return cart_total(self.groups)

    async def load(self) -> None:
        self.state.set_loading()
        try:
            lines = await self.client.list_cart(self.user_name)
        except (DecodingError, ServerError) as e:
            # The backend answers an empty or never-used cart with an
            # unreadable or failed reply; both render as an empty cart.
            logger.info(f"Cart of {self.user_name} treated as empty: {e.description}")
            self.raw_lines = []
            self.state.set_loaded([])
            return
        except APIError as e:
            logger.error(f"Failed to load cart of {self.user_name}: {e.description}")
            self.state.set_failed(e.description)
            return

        self.raw_lines = list(lines)
        self.state.set_loaded(group_cart_lines(self.raw_lines))

    async def delete(self, group: CartGroup) -> List[int]:
        """Delete every cart line of ``group``, then reload from the backend.

        Individual failures are logged and skipped, never retried and never
        raised. Returns the cart ids whose deletion was not confirmed.
        """
        failed: List[int] = []

        for cart_id in group.cart_ids:
            try:
                removed = await self.client.remove_cart_line(cart_id, self.user_name)
            except APIError as e:
                logger.warning(f"Could not delete cart line {cart_id}: {e.description}")
                failed.append(cart_id)
                continue

            if not removed:
                logger.warning(f"Backend refused to delete cart line {cart_id}")
                failed.append(cart_id)

        await self.load()
        return failed
