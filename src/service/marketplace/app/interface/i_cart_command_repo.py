from abc import ABC, abstractmethod


class ICartCommandRepo(ABC):
    @abstractmethod
    async def add_entry(self, *, user_id: int, product_id: int) -> bool:
        """
        Add the product to the user's cart while it is still AVAILABLE

        Re-adding an existing entry is a no-op. Returns False when the product
        is missing or no longer available at write time.
        """
        pass

    @abstractmethod
    async def remove_entry(self, *, user_id: int, product_id: int) -> None:
        """Removing an absent entry is a no-op"""
        pass

    @abstractmethod
    async def remove_entries_for_product(self, *, product_id: int) -> int:
        """Clear the product from every cart, returns the number of entries removed"""
        pass
