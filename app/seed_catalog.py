"""
Built-in menu catalog.

These items are seeded from code, never stored unless an image is generated
for them, and are always considered safe to publish.
"""
from app.schemas import CatalogItem

# (id, type, name, description, tags)
_SEED_ROWS = [
    ("s1", "soup", "Angus Beef Barley", "", ()),
    ("s2", "soup", "Athletic Freakster", "", ()),
    ("s3", "soup", "Beef Barley", "", ()),
    ("s4", "soup", "Beef Mushroom Barley", "", ()),
    ("s5", "soup", "Beef Vegetables", "", ()),
    ("s6", "soup", "Black Angus Beef Chilli", "Rich beef chilli with beans", ("GF", "Comfort")),
    ("s7", "soup", "Broccoli Cheddar", "", ("Vegetarian",)),
    ("s8", "soup", "Broccoli Cauliflower", "", ("Vegetarian",)),
    ("s9", "soup", "Buffalo Chicken Soup", "", ()),
    ("s10", "soup", "Butternut Squash", "Roasted butternut squash with warm spices and coconut milk", ("Vegan", "GF", "Seasonal")),
    ("s10b", "soup", "Butternut Squash Bisque", "", ("Vegetarian",)),
    ("s11", "soup", "Cabbage Soup", "", ("Vegetarian",)),
    ("s11b", "soup", "Carrot Bisque", "", ("Vegetarian",)),
    ("s11c", "soup", "Carrot Creamer", "", ("Vegetarian",)),
    ("s12", "soup", "Carrot Ginger", "", ("GF", "VEG")),
    ("s12b", "soup", "Chickpeas Carrot Bisque", "", ("GF", "VEG", "Vegetarian")),
    ("s13", "soup", "Chicken Buffalo Soup", "", ()),
    ("s14", "soup", "Chicken Florentine", "", ()),
    ("s15", "soup", "Chicken Lime Orzo", "", ()),
    ("s16", "soup", "Chicken Mushroom Orzo", "", ()),
    ("s17", "soup", "Chicken Noodle", "Hearty soup with tender chicken, fresh vegetables, and egg noodles", ("Classic",)),
    ("s18", "soup", "Chicken Pot Pie", "", ()),
    ("s19", "soup", "Chicken Spinach & Potato", "", ()),
    ("s20", "soup", "Chickpea Soup", "", ("Vegetarian",)),
    ("s21", "soup", "Chickpeas Whitebeans", "", ("Vegetarian",)),
    ("s22", "soup", "Chunky Celery", "", ("GF", "VEG", "DF")),
    ("s23", "soup", "Clam Chowder", "", ()),
    ("s24", "soup", "Cornbeef Cabbage Chickpeas", "", ()),
    ("s25", "soup", "Cornbeef, Cabbage, Tomato DF", "", ()),
    ("s26", "soup", "Creamy Carrots", "", ("Vegetarian",)),
    ("s27", "soup", "Creamy Chicken Corn", "", ()),
    ("s28", "soup", "Creamy Chicken Rice", "", ()),
    ("s29", "soup", "Creamy Mushroom", "", ("Vegetarian",)),
    ("s30", "soup", "Creamy Rice Spinach", "", ("Vegetarian",)),
    ("s31", "soup", "Creamy Tomato Basil", "Rich, velvety tomato soup with fresh basil and cream", ("Vegetarian",)),
    ("s32", "soup", "French Onion", "Caramelized onions in rich beef broth, topped with Gruyère", ("Signature", "GF", "DF")),
    ("s33", "soup", "Garden Minestrone", "Hearty Italian soup with fresh vegetables, beans, and pasta", ("Vegan",)),
    ("s34", "soup", "Gazpacho", "", ("VEG", "GF", "COLD")),
    ("s35", "soup", "Golden Split Pea", "", ("GF", "VEG")),
    ("s36", "soup", "Green Peas", "", ("VEG",)),
    ("s37", "soup", "Green Peas Ham", "", ()),
    ("s38", "soup", "Italian Wedding", "", ()),
    ("s39", "soup", "Kidney Bean", "", ("GF", "VEG", "DF")),
    ("s40", "soup", "Lemon Chicken Orzo", "", ()),
    ("s41", "soup", "Lucky Lentil", "", ("GF", "VEG", "DF")),
    ("s42", "soup", "Manhattan Clam Chowder", "", ()),
    ("s43", "soup", "Mushroom Barley", "", ()),
    ("s44", "soup", "Mushroom Bisque", "", ("Vegetarian",)),
    ("s45", "soup", "New England Clam Chowder", "", ()),
    ("s46", "soup", "Pasta Fagioli", "", ("Vegetarian",)),
    ("s47", "soup", "Potato Bacon", "", ()),
    ("s48", "soup", "Potato Bacon Cheddar", "", ()),
    ("s49", "soup", "Potato Cheddar Bacon", "", ()),
    ("s50", "soup", "Potato Soup", "", ()),
    ("s51", "soup", "Roasted Green Peas", "", ("VEG",)),
    ("s52", "soup", "Roasted Red Pepper Bisque", "", ("Vegetarian",)),
    ("s53", "soup", "Rustic Tomato", "", ("GF", "Vegetarian")),
    ("s54", "soup", "Santa Fe Black Bean", "", ("Vegetarian",)),
    ("s55", "soup", "Seafood Bisque", "Creamy bisque with fresh shrimp, crab, and sherry", ("Premium",)),
    ("s56", "soup", "Smoked Ham Potato", "", ()),
    ("s57", "soup", "Southwest Black Beans", "", ("GF", "VEG")),
    ("s58", "soup", "Spinach Orzo", "", ("Vegetarian",)),
    ("s59", "soup", "Summer Vegetable Soup", "", ("Vegetarian",)),
    ("s60", "soup", "Tomato Bisque", "", ("GF", "Vegetarian")),
    ("s61", "soup", "Tomato Soup", "", ("Vegetarian",)),
    ("s62", "soup", "Vegetable Bisque", "", ("Vegetarian",)),
    ("s63", "soup", "White Chilli Turkey", "Spicy white bean chili with turkey", ("GF", "Spicy")),
    ("s64", "soup", "Wild Rice & Vegetable", "", ()),
    ("p1", "panini", "BBQ Meatballs", "", ()),
    ("p2", "panini", "BBQ Pulled Pork", "", ()),
    ("p3", "panini", "BBQ Turkey Bacon", "", ()),
    ("p4", "panini", "Beef Corned Reuben", "", ()),
    ("p5", "panini", "Broccoli Cheddar", "", ("Vegetarian",)),
    ("p6", "panini", "Buffalo Chicken", "", ()),
    ("p7", "panini", "Buffalo Chicken Cutlet, Blue Cheese, Bacon, Lettuce Tomato in Ciabatta", "", ()),
    ("p8", "panini", "Buffalo Chicken Cutlet, Blue Cheese, Chipotle Mayo w/Cheddar", "", ()),
    ("p9", "panini", "Corn Beef, Coleslaw, Swiss Cheese, 1000 Island Dressing", "", ()),
    ("p10", "panini", "Crab Cake", "", ()),
    ("p11", "panini", "Cuban Panini: Ham, Pork Pickle, Swiss Cheese, w/ Mustard", "", ()),
    ("p12", "panini", "Curried Chicken Salad", "", ()),
    ("p13", "panini", "Egg Salad", "", ("Vegetarian",)),
    ("p14", "panini", "Grilled Chicken", "", ()),
    ("p15", "panini", "Grilled Chicken, Bacon, Pesto-Mayo, Sauteed Onions, Pepper Jack Cheese, Lettuce & Tomato on Ciabatta", "", ()),
    ("p16", "panini", "Grilled Chicken, Sauteed Pepper-Onions, Chipotle Mayo w/Cheddar", "", ()),
    ("p17", "panini", "Grilled Chicken Pesto, Bacon, Peppers, Onions, Mix Shreaded Cheese, Lettuce, Tomato on Ciabatta", "", ()),
    ("p18", "panini", "Grilled Chicken with Bacon, Chipotle & Pepper Jack", "", ()),
    ("p19", "panini", "Ham, Pickle Ham, Mustard, Cheddar Cheese, Lettuce & Tomato", "", ()),
    ("p20", "panini", "Ham, Swiss Cheese, Cole Slaw w/ Russian Dressing in Ciabatta", "", ()),
    ("p21", "panini", "Ham, Turkey Joe, Coleslaw, Russian Dressing, Swiss, Lettuce, Tomato in Ciabatta", "", ()),
    ("p22", "panini", "Ham Honey, Mustard, Sauteed Onions w/Provolone Cheese", "", ()),
    ("p23", "panini", "Ham Mozzarella, Sweet Onion Relish", "", ()),
    ("p24", "panini", "Herb Roasted Chicken w/ Mashed Potatoes", "", ()),
    ("p25", "panini", "Honey Mustard, Cranberry Jam, Swiss Cheese, Ham, Bacon, Lettuce & Tomato", "", ()),
    ("p26", "panini", "Meatball Parmesan", "", ()),
    ("p27", "panini", "Pastrami in 1000 Island dressing, Mustard w/ Swiss Cheese", "", ()),
    ("p28", "panini", "Pastrami Ruben, Sauerkraut, Swiss Cheese, Russian Dressing, Lettuce Tomato on Ciabatta", "", ()),
    ("p29", "panini", "Pastrami, Sauerkraut, Swiss Cheese, Russian Dressing, Lettuce, Tomato on Ciabatta", "", ()),
    ("p30", "panini", "Pesto Mayo, Grilled Chicken, Bacon, Lettuce & Tomato in Ciabatta", "", ()),
    ("p31", "panini", "Pork Chop", "", ()),
    ("p32", "panini", "Roast Beef, Lettuce, Tomatoes, Provolone, Horseradish Cream", "", ()),
    ("p33", "panini", "Shreaded Chicken, BBQ BAcon, Sauteed Pepper Onions, Cheddar Cheese", "", ()),
    ("p34", "panini", "Smoked Ham BBQ", "Smoked Ham, Bacon, Tomatoes, Cheddar BBQ sauce", ()),
    ("p35", "panini", "Tuna Melt", "", ()),
    ("p36", "panini", "Turkey & Cranberry", "", ()),
    ("p37", "panini", "Turkey, Bacon, Cheddar, Tomato & Honeymustard", "", ()),
    ("p38", "panini", "Turkey, Bacon, Ham, Honey Mustard, Lettuce, Tomato & Swiss Cheese", "", ()),
    ("p39", "panini", "Turkey, Bacon, Pepperjack Cheese, Lettuce, Tomato w/ Ranch Dressing", "", ()),
    ("p40", "panini", "Turkey, Brie Cheese, Chipotle Mayo", "", ()),
    ("p41", "panini", "Ham Bacon on Ciabatta", "Ham and bacon on fresh ciabatta bread", ()),
    ("sw1", "sandwich", "Asian Grilled Chicken, Carrots, Tomato, Zucchini, Lettuce in Spinach Wrap", "", ()),
    ("sw2", "sandwich", "Asian Sesame Grilled Chicken, Carrot, Cucumber in Sundried Tomato Wrap", "", ()),
    ("sw3", "sandwich", "BBQ Grilled Chicken, Cheddar Cheese, Potato Salad & Mix Greens in Semolina Bread", "", ()),
    ("sw4", "sandwich", "BBQ Grilled Chicken, Cheddar Cheese, Potato Salad in Spinach Wrap", "", ()),
    ("sw5", "sandwich", "Blackened Chicken, Southwest Salad, Romaine, Tomato, Cucumber, Carrots, Corn Salsa, Red Onions with Chipotle Ranch", "", ()),
    ("sw6", "sandwich", "Buffalo Chicken, Bacon, Blue Cheese, Lettuce & Tomatoes", "", ()),
    ("sw7", "sandwich", "Caprese Chicken", "Grilled Chicken, Balsamic Glaze, Mix Greens, Mozzarella & Tomato", ()),
    ("sw8", "sandwich", "Chicken, Bacon, Lettuce, Tomato, Ranch Dressing in Spinach Wrapp", "", ()),
    ("sw9", "sandwich", "Chicken Caprese Mozzarella, Tomato, Basil and Balsamic Glaze in Sundried Tomato Wrap", "", ()),
    ("sw10", "sandwich", "Chicken Cutlet, Bacon, Mayo Lettuce & Tomato in Spinach Wrap", "", ()),
    ("sw11", "sandwich", "Cobb Salad", "", ()),
    ("sw12", "sandwich", "Cod Sandwich", "", ()),
    ("sw13", "sandwich", "Corn Beef, Coleslaw, Swiss Cheese, 1000 Island Dressing", "", ()),
    ("sw14", "sandwich", "Crab Salad", "", ()),
    ("sw15", "sandwich", "Curried Chicken Salad w/ Spinach & Miso Tomato", "", ()),
    ("sw16", "sandwich", "Egg Salad, Bacon, Spinach, Lettuce, Tomato in a Wrapp", "", ("Vegetarian",)),
    ("sw17", "sandwich", "Egg Salad Spinach Tomatoes Honeymustard", "", ("Vegetarian",)),
    ("sw18", "sandwich", "Grilled BBQ Chicken, Bacon, Potato Salad, Cheddar Cheese, Mix Greens in Spinach Wrap", "", ()),
    ("sw19", "sandwich", "Grilled BBQ Chicken, CHeddar Cheese, Potato Salad Organic Mix Green in a Wrapp", "", ()),
    ("sw20", "sandwich", "Grilled Chicken, American Cheese, Avocado, Mayo, Lettuce & Tomato in Wrap", "", ()),
    ("sw21", "sandwich", "Grilled Chicken, Buffalo, Bacon, Cheddar Cheese, Lettuce & Tomato in Wrap", "", ()),
    ("sw22", "sandwich", "Grilled Chicken Bacon Cheddar Tomato", "", ()),
    ("sw23", "sandwich", "Grilled Chichecn, Sauteed Onions, Roasted Red Pepper & Spinach Wrapp", "", ()),
    ("sw24", "sandwich", "Halana Wrap: Grilled Chicken, American Cheese, Avocado, Mayo, Lettuce & Tomato", "", ()),
    ("sw25", "sandwich", "Ham CHeddar, Pickle, Lettuce, Tomato- 1000 Island Dressing", "", ()),
    ("sw26", "sandwich", "Ham Mozzarella Sweet Onion Relish Balsamic Glaze", "", ()),
    ("sw27", "sandwich", "Ham Prosciutto Roasted Peppers Pesto", "", ()),
    ("sw28", "sandwich", "Herb Roasted Turkey Pesto", "", ()),
    ("sw29", "sandwich", "Homemade Chicken Pot Pie", "", ()),
    ("sw30", "sandwich", "Jerk Roasted Chicken with Mashed Potatoes", "", ()),
    ("sw31", "sandwich", "Pastrami, Coleslaw, Pickle, Lettuce, Tomato, Swiss Cheese in Whole wheat Wrapp", "", ()),
    ("sw32", "sandwich", "Roasted Turkey Portobello Lettuce Tomato Pesto", "", ()),
    ("sw33", "sandwich", "Smoked Ham, Sloppy Joes, Coles Slaw, Swiss Cheese & Russian Dressing", "", ()),
    ("sw34", "sandwich", "Tuna Fish", "Tunafish Salad with Swiss Springmix & Tomatoes on Focaccia Bread", ()),
    ("sw35", "sandwich", "Turkey, Bacon, Lettuce, Tomato with Pesto Mayo in Spinach Wrap", "", ()),
    ("sw36", "sandwich", "Turkey Club, Mayo, Swiss Cheese, Bacon, Avocado, Lettuce Tomatoes", "", ()),
    ("sw37", "sandwich", "Turkey Club Wrap", "", ()),
    ("sw38", "sandwich", "Turkey, Bacon, Lettuce, Tomato, Mayo in Semolina Bread", "", ()),
    ("sw39", "sandwich", "Turkey, BLT, Avocado and Mayo", "", ()),
    ("sw40", "sandwich", "Turkey, Brie Cheese, Chipotle Mayo", "", ()),
    ("sw41", "sandwich", "Turkey, Brie Cheese, Cranberries, Lattuce, Tomatoes Mayo in Semolina Bread", "", ()),
    ("sw42", "sandwich", "Turkey, Fig Jam, Brie Cheese, Honey Mustard, Lettuce, Tomato in Spinach Bread", "", ()),
    ("sw43", "sandwich", "Turkey Swiss Cheese BLT Pesto", "", ()),
    ("sw44", "sandwich", "Ham Bacon in a Wrapp", "Ham and bacon wrapped in a fresh tortilla", ()),
    ("sl1", "salad", "Apple Salad, Cucumber, Tomato, Onions, Carrot, w/ Italian Dressing", "", ("Vegetarian",)),
    ("sl2", "salad", "Arugula Mango Salad, Tomato, Cucumber, Onions, Carrots, Walnuts w/ Poppy Seed Dressing", "", ("Vegetarian",)),
    ("sl3", "salad", "Asian Salad: Chicken, Madarine, Almonds, Carrots, Cucumber, Tomato, Onions w/ Sesame Seed Asian Dressing", "", ()),
    ("sl4", "salad", "Asian Sesame Grilled Chicken Salad, Romaine, Mix Greens, Carrots, Mandarins, Tomato, Cucumber, Peppers with Asian Dressing", "", ()),
    ("sl5", "salad", "Blackened Chicken Caesar", "", ()),
    ("sl6", "salad", "Blueberries, Cranberries, Strawberries, Feta Cheese, Spinach, Salad, Walnut, Carrots, Tomatoes, Cucumber and Onion", "", ("Vegetarian",)),
    ("sl7", "salad", "Chef-Salad: Turkey, Ham, Romaine, Swiss, Hard Boiled Eggs, Cucumber, Carrots, Onion & Tomato w/ Ranch Dressing", "", ()),
    ("sl8", "salad", "Chicken Bruschetta, Mixed Greens, Chicken, Fresh Mozzarella, Bruschetta toppings w/Balsamic", "", ()),
    ("sl9", "salad", "Chicken Caesar Salad", "", ()),
    ("sl10", "salad", "Classic Cobb", "Grilled Chicken, Bacon, Tomato, Cucumber, Boiled Egg, Red Onions, Crumbled Blue Cheese w Ranch Dressing", ()),
    ("sl11", "salad", "Green Salad: Romaine, Grilled Chicken, Tomato, Cucumber, Carrots, Red Onions, Feta Cheese, Stuffed Leaves, Olives in Greek Dressing", "", ()),
    ("sl12", "salad", "Greek Salad, Romaine Lettuce, Red Onions, Cucumber, Carrots, Tomatoes, Stuffed Leaves, Feta Cheese, Grilled Chicken in Greek Dressing", "", ()),
    ("sl13", "salad", "Grilled Chicken Caesar", "", ()),
    ("sl14", "salad", "Mango- Cranberry Salad, Crrots, Cucumber, Tomato, Onions in Italian Dressing", "", ()),
    ("sl15", "salad", "Peach, Cranberries, Tomato, Onions, Cucumber, Feta Cheese w/ Poppyseed Dressing", "", ("Vegetarian",)),
    ("sl16", "salad", "Strawberry, Cranberry, Almonds, Feta Cheese, Cucumber, Carrots, Tomatoes, Poppy Seed Dressing", "", ("Vegetarian",)),
    ("sl17", "salad", "Summer Berry", "Mixed Greens, Tomatoes, Cucumbers, Grilled Chicken, Grapes, Pecans, Feta Cheese, Balsamic", ("Seasonal",)),
    ("sl18", "salad", "Tropical Salad: Mango, Strawberry, Organic MixGreen, Tomato, Cucumber, Onions in Italian Dressing", "", ("Vegetarian",)),
    ("e1", "entree", "7 Cheese-Mac n Cheese", "", ("Vegetarian",)),
    ("e2", "entree", "Asian Fried Rice with Chicken", "", ()),
    ("e3", "entree", "Beef Stew w/ Egg Noodles", "", ()),
    ("e4", "entree", "Breaded Four Cheese, Ravioli, w/ Marinara Sauce", "", ("Vegetarian",)),
    ("e5", "entree", "Chicken Cutlet, Bacon, Mayo", "", ()),
    ("e6", "entree", "Chicken Lo Mein w/Vegetables", "", ()),
    ("e7", "entree", "Chicken Mulligatawny", "", ()),
    ("e8", "entree", "Chicken Stir Fry", "", ()),
    ("e9", "entree", "Chinese Chicken Fried Rice w/ Vegetables", "", ()),
    ("e10", "entree", "Creamy Chicken Rigatoni", "", ()),
    ("e11", "entree", "Creamy Mushroom Chicken with Rice", "", ()),
    ("e12", "entree", "Creamy Mushroom Penne Pasta w/ Grilled Chicken", "", ()),
    ("e13", "entree", "Egg Noodle with Teriyaki Meatballs", "", ()),
    ("e14", "entree", "Herb Roasted Chicken w/ Mashed Potatoes & Vegetables", "", ()),
    ("e15", "entree", "Herb Roasted Chicken with Mashed Potatoes and Sauteed Veggies", "", ()),
    ("e16", "entree", "Honey Roasted Chicken Pot Pie", "", ()),
    ("e17", "entree", "Jerk Roasted Chicken w/ Mashed Potatoes", "", ()),
    ("e18", "entree", "Mac & Cheese", "", ("Vegetarian",)),
    ("e19", "entree", "Mac N Cheese w/Bacon", "", ()),
    ("e20", "entree", "Oven Roasted Turkey, Stuffings, Mashed Potato w/Cranberry Sauce Gravy", "", ()),
    ("e21", "entree", "Penne Marinara with Chicken Parmesan", "", ()),
    ("e22", "entree", "Penne Pasta Marinara w/ Chicken Cutlet", "", ()),
    ("e23", "entree", "Penne Pasta Marinara Sauce w/Garlic Chicken", "", ()),
    ("e24", "entree", "Penne Vodka with Grilled Chicken", "", ()),
    ("e25", "entree", "Pork Loin w/Mashed Potatoes", "", ()),
    ("e26", "entree", "Pulled BBQ Chicken with Rice and Veggies", "", ()),
    ("e27", "entree", "Roasted Chicken w/Rice", "", ()),
    ("e28", "entree", "Seared Beef Topped w/ Mashed Potatoes", "", ()),
    ("e29", "entree", "Shepherd's Pie w/ side Salad", "", ()),
    ("e30", "entree", "Sweetheart Meatballs over Dutch Noodles", "", ()),
    ("e31", "entree", "Teriyaki Chicken", "Teriyaki Chicken Over Egg Noodles", ()),
    ("e32", "entree", "Teriyaki Meatballs w/ Jasmine Rice", "", ()),
    ("e33", "entree", "Tri-Color Tortellini with White Sauce", "", ()),
    ("e34", "entree", "Vegetable Soup (Optional Rice Add-On)", "", ("Vegetarian",)),
    ("e35", "entree", "Vodka Penne", "Rigatoni w/Vodka Sauce & Grilled Chicken with side Salad", ()),
    ("e36", "entree", "White Wine Penne Pasta with Grilled Chicken and Bacon", "", ()),
    ("e37", "entree", "Teriyaki Egg Noodles with Grilled Chicken & Meatballs", "", ()),
    ("s65", "soup", "Green Pea w/Ham", "", ()),
    ("s66", "soup", "Creamy Cauliflower", "", ("Vegetarian",)),
    ("s67", "soup", "Summer Veggies", "", ("VEG",)),
    ("s68", "soup", "Shrimp Chowder", "", ()),
    ("s69", "soup", "Split Pea", "", ("Veg", "GF")),
    ("s70", "soup", "Shrimp & Corn Chowder", "", ()),
    ("s71", "soup", "Potato Cheddar & Bacon", "", ()),
    ("s72", "soup", "Lucky Lentil", "", ()),
    ("s73", "soup", "Lemon Chicken Orzo", "", ()),
    ("p42", "panini", "Pastrami Reuben", "", ()),
    ("p43", "panini", "Texas Meatloaf, Bacon, Cheddar & BBQ Sauce on Texan Toast", "", ()),
    ("p44", "panini", "Godfather: Chicken Cutlet, Fresh Mozzarella, Bacon & Russian Dressing", "", ()),
    ("p45", "panini", "Smothered Chicken w/ Caramelized Onions Mushrooms, Swiss & Horseradish", "", ()),
    ("p46", "panini", "Chicken Cordon Bleu w/ Swiss, Tomato, Honey Mustard", "", ()),
    ("p47", "panini", "Pastrami Reuben on Rye", "", ()),
    ("sw45", "sandwich", "Grilled Chicken, Pesto Mayo, Sauteed Peppers-n-Onions, Lettuce, Tomato, Spinach in a Wrapp", "", ()),
    ("sw46", "sandwich", "Egg Salad, Bacon, Lettuce, Onion, Tomato, in Spinach Wrap", "", ()),
    ("sw47", "sandwich", "Roast Beef, Lettuce, Tomato, Onion, Provolone Cheese w/ Horse-Radish Cream", "", ()),
    ("sw48", "sandwich", "Turkey Swiss Lettuce, Tomatoes, Cranberry, Mayo on 7 Grain", "", ()),
    ("sw49", "sandwich", "Roastbeef, Fresh Mozzarella, Spinach, Sundried Tomatoes, Pesto Mayoon Spinach Wrap", "", ()),
    ("sw50", "sandwich", "Egg Salad BLT on 7 Grain", "", ()),
    ("sw51", "sandwich", "Shrimp Salad w/Lettuce, Tomatoes on a Wheat Bread", "", ()),
    ("sw52", "sandwich", "Turkey Bacon, Pepperjack, Lettuce, Tomato, Chipotle Mayo on Semolina", "", ()),
    ("sw53", "sandwich", "Pastrami Sloppy Joe in a Plain Wrapp", "", ()),
    ("sw54", "sandwich", "Turkey, Bacon, Pepperjack, Lettuce, Tomatoes, & Ranch On Ciabatta", "", ()),
]

SEED_ITEMS: tuple[CatalogItem, ...] = tuple(
    CatalogItem(id=item_id, type=item_type, name=name, description=description, tags=list(tags))
    for item_id, item_type, name, description, tags in _SEED_ROWS
)

SEED_ITEM_IDS = frozenset(item.id for item in SEED_ITEMS)


def is_builtin(item_id: str) -> bool:
    return item_id in SEED_ITEM_IDS
