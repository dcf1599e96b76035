"""Built-in product set shown when neither Shopify nor any cache can answer."""

from .models import Product

STATIC_PRODUCTS: tuple[Product, ...] = (
    Product(id=1, name="AI Builder Hoodie", category="hoodies", price=59.99,
            description="Premium hoodie for AI-powered developers", emoji="👨‍💻"),
    Product(id=2, name="Chat with AI Tee", category="tees", price=29.99,
            description="Comfortable t-shirt celebrating AI builders", emoji="💬"),
    Product(id=3, name="Code Generator Hoodie", category="hoodies", price=64.99,
            description="Stay warm while building with AI", emoji="⚡"),
    Product(id=4, name="Lovable Sticker Pack", category="stickers", price=9.99,
            description="Set of 10 premium stickers", emoji="✨"),
    Product(id=5, name="AI Developer Tee", category="tees", price=27.99,
            description="Show your AI developer pride", emoji="🤖"),
    Product(id=6, name="Build Fast Hoodie", category="hoodies", price=62.99,
            description="For developers who ship quickly", emoji="🚀"),
    Product(id=7, name="Gradient Logo Sticker", category="stickers", price=4.99,
            description="Holographic Lovable logo sticker", emoji="🌈"),
    Product(id=8, name="AI Powered Tee", category="tees", price=31.99,
            description="Celebrate the AI revolution", emoji="🔥"),
    Product(id=9, name="Developer Cap", category="accessories", price=24.99,
            description="Adjustable cap with embroidered logo", emoji="🧢"),
    Product(id=10, name="Coding Mug", category="accessories", price=16.99,
            description="Ceramic mug for your favorite beverage", emoji="☕"),
    Product(id=11, name="Keyboard Stickers", category="stickers", price=7.99,
            description="Customize your keyboard", emoji="⌨️"),
    Product(id=12, name="Tech Tote Bag", category="accessories", price=19.99,
            description="Durable canvas tote bag", emoji="🛍️"),
)
