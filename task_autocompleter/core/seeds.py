# seeds.py - built-in vocabulary the engine starts from on every run

# Boost tiers used while seeding and learning
ACTION_BOOST = 5
OBJECT_BOOST = 3
LEARN_BOOST = 1

# Verbs that usually open a task ("buy milk", "call mom")
SEED_ACTIONS = (
    "buy",
    "call",
    "clean",
    "cook",
    "email",
    "finish",
    "fix",
    "make",
    "meet",
    "pay",
    "pick",
    "read",
    "send",
    "visit",
    "wash",
    "write",
)

# Common things those verbs act on
SEED_OBJECTS = (
    "milk",
    "bread",
    "eggs",
    "groceries",
    "mom",
    "dad",
    "doctor",
    "dentist",
    "report",
    "meeting",
    "homework",
    "laundry",
    "dishes",
    "car",
    "rent",
    "bills",
    "gym",
    "dog",
)
