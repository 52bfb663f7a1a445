import attrs


@attrs.frozen
class SampleImage:
    id: int
    name: str
    url: str
    category: str


# (name, unsplash photo id, category)
_SAMPLES = (
    ('Electronics - Laptop', '1496181133206-80ce9b88a853', 'Electronics & Gadgets'),
    ('Fashion - Jacket', '1551028719-00167b16eac5', 'Fashion & Accessories'),
    ('Books - Collection', '1481627834876-b7833e8f5570', 'Books, Music & Hobbies'),
    ('Sports - Bicycle', '1558618047-3c8c76ca7d13', 'Sports & Fitness'),
    ('Home - Chair', '1586023492125-27b2c045efd7', 'Home & Furniture'),
    ('Kids - Board Games', '1606092195730-5d7b9af1efc5', 'Kids & Baby'),
    ('Electronics - Phone', '1511707171634-5f897ff02aa9', 'Electronics & Gadgets'),
    ('Fashion - Shoes', '1549298916-b41d501d3772', 'Fashion & Accessories'),
    ('Vehicle - Car', '1552519507-da3b142c6e3d', 'Vehicles'),
    ('Appliances - Microwave', '1574269909862-7e1d70bb8078', 'Appliances'),
)

# Stock pictures offered to sellers who list without their own photo
SAMPLE_IMAGES: tuple[SampleImage, ...] = tuple(
    SampleImage(
        id=index,
        name=name,
        url=f'https://images.unsplash.com/photo-{photo_id}?w=400&h=300&fit=crop',
        category=category,
    )
    for index, (name, photo_id, category) in enumerate(_SAMPLES, start=1)
)
