"""Built-in product list used when the remote catalog is unavailable."""

from milk_tea_tracker.domain.products import Product

STATIC_PRODUCTS: tuple[Product, ...] = (
    Product(
        id="1",
        name="Cheezo Grape",
        brand="HEYTEA",
        calories=320,
        sugar="standard",
        size="500ml",
        ingredients=("grape", "jasmine green tea", "cheese foam", "ice"),
        rating=4.8,
        category="high",
        description="Fresh grape pulp with green tea and cheese foam",
    ),
    Product(
        id="2",
        name="Pure Green Tea",
        brand="HEYTEA",
        calories=90,
        sugar="none",
        size="500ml",
        ingredients=("jasmine green tea",),
        rating=4.2,
        category="low",
        description="Unsweetened jasmine green tea",
    ),
    Product(
        id="3",
        name="Bobo Milk Tea",
        brand="HEYTEA",
        calories=380,
        sugar="standard",
        size="500ml",
        ingredients=("black tea", "milk", "brown sugar boba"),
        rating=4.6,
        category="high",
        description="Black milk tea with brown sugar boba",
    ),
    Product(
        id="4",
        name="Bawang Milk Tea",
        brand="CHAGEE",
        calories=245,
        sugar="standard",
        size="470ml",
        ingredients=("oolong tea", "fresh milk"),
        rating=4.7,
        category="medium",
        description="Fresh milk with light oolong tea",
    ),
    Product(
        id="5",
        name="Jasmine Snow Milk Tea",
        brand="CHAGEE",
        calories=210,
        sugar="light",
        size="470ml",
        ingredients=("jasmine tea", "fresh milk"),
        rating=4.5,
        category="medium",
        description="Floral jasmine tea with fresh milk",
    ),
    Product(
        id="6",
        name="Pearl Milk Tea",
        brand="CoCo",
        calories=350,
        sugar="standard",
        size="700ml",
        ingredients=("black tea", "creamer", "tapioca pearls"),
        rating=4.3,
        category="high",
        description="Classic milk tea with tapioca pearls",
    ),
    Product(
        id="7",
        name="Passion Fruit Green Tea",
        brand="CoCo",
        calories=160,
        sugar="half",
        size="700ml",
        ingredients=("green tea", "passion fruit", "coconut jelly", "ice"),
        rating=4.4,
        category="low",
        description="Green tea with passion fruit and coconut jelly",
    ),
    Product(
        id="8",
        name="Signature Milk Green",
        brand="Nayuki",
        calories=230,
        sugar="standard",
        size="500ml",
        ingredients=("green tea", "fresh milk", "cream"),
        rating=4.1,
        category="medium",
        description="Green tea latte topped with cream",
    ),
    Product(
        id="9",
        name="Oolong Milk Tea",
        brand="Nayuki",
        calories=260,
        sugar="standard",
        size="500ml",
        ingredients=("oolong tea", "milk", "grass jelly", "pudding", "ice"),
        rating=4.0,
        category="medium",
        description="Roasted oolong milk tea with grass jelly",
    ),
    Product(
        id="10",
        name="Lemon Black Tea",
        brand="Mixue",
        calories=140,
        sugar="standard",
        size="500ml",
        ingredients=("black tea", "lemon", "ice"),
        rating=4.2,
        category="low",
        description="Iced black tea with fresh lemon slices",
    ),
    Product(
        id="11",
        name="Pearl Milk Tea",
        brand="Mixue",
        calories=300,
        sugar="standard",
        size="500ml",
        ingredients=("black tea", "creamer", "tapioca pearls"),
        rating=3.9,
        category="high",
        description="Budget milk tea with tapioca pearls",
    ),
    Product(
        id="12",
        name="Brown Sugar Boba Latte",
        brand="Tiger Sugar",
        calories=420,
        sugar="full",
        size="500ml",
        ingredients=("fresh milk", "brown sugar syrup", "boba", "cream mousse"),
        rating=4.6,
        category="high",
        description="Fresh milk with brown sugar boba stripes",
    ),
)
