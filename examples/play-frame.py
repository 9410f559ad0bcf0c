from blockframe import Frame, JoinType, config

config.enable_debug()

shops = Frame("shop_id", "city", "name")
shops.append([1, "Rome", "Shop 1 in Rome"]) \
  .append([2, "Milan", "Shop 1 in Milan"]) \
  .append([3, "Rome", "Shop 2 in Rome"]) \
  .append([4, "Naples", None])

sales = Frame.from_columns({
  "shop_id": [3, 1, 2, 5],
  "name": ["Laptop", "TV", "Dress", "Car"],
  "quantity": [8, 2, None, 1],
})

report = shops.join_on(sales, JoinType.OUTER, "shop_id") \
  .fill_na("quantity", 0) \
  .sort_by("city", "-quantity")

print(report)
print()
print(report.unique("city").drop("name_left", "name_right"))
