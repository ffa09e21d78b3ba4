#!/usr/bin/env python3
"""
mongoext - Basic Usage Example

This example demonstrates:
- Connecting through mongoext
- Type-safe inserts with Int(), Long() and Double()
- set1(), set_n() and set() updates
- ObjectId query shorthands with find1() and find_n()
"""

from mongoext import Client, Double, Int, Long, UnsafeNumberError, not_


def main():
    print("=" * 60)
    print("mongoext - Basic Usage Example")
    print("=" * 60)

    client = Client(host='localhost', port=27017, database='mongoext_example', timeout=5)

    # Check connection
    if client.ping():
        print("✓ Successfully connected to MongoDB")
    else:
        print("✗ Failed to connect to MongoDB")
        return

    client.drop_collection('players')
    players = client.collection('players')

    print("\n1. SAFE INSERT")
    print("-" * 60)
    result = players.safe_insert({
        'name': 'Max',
        'city': 'Barcelona',
        'score': Int(8),
        'views': Long(1200000000000),
        'height': Double(1.75),
    })
    player_id = str(result.inserted_id)
    print(f"Inserted player with ID: {player_id}")

    players.safe_insert([
        {'name': 'Ada', 'city': 'Barcelona', 'score': Int(9), 'team': 'red'},
        {'name': 'Bob', 'city': 'Girona', 'score': Int(4), 'team': None},
    ])
    print("Inserted 2 more players")

    print("\n2. RAW NUMBERS ARE REJECTED")
    print("-" * 60)
    try:
        players.safe_insert({'name': 'Eve', 'score': 7})
    except UnsafeNumberError as e:
        print(f"Rejected: {e}")

    print("\n3. SET1 BY ID STRING")
    print("-" * 60)
    players.set1(player_id, {'points': Int(3)})
    print(players.find1(player_id))

    print("\n4. SET_N")
    print("-" * 60)
    update = players.set_n({'city': 'Barcelona'}, {'province': 'Barcelona'})
    print(f"Updated {update.modified_count} players")

    print("\n5. SET WITH UPSERT")
    print("-" * 60)
    players.set({'name': 'Eve'}, {'score': Int(7)}, multi=False, upsert=True)
    print(players.find1({'name': 'Eve'}))

    print("\n6. FIND_N (PRETTY)")
    print("-" * 60)
    print(players.find_n({'team': not_(None)}, {'_id': 0}).sort('name', 1))

    client.drop_collection('players')
    client.close()


if __name__ == '__main__':
    main()
