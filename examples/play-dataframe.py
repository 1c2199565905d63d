import operator

from numframe import RandomFrameGenerator

df = RandomFrameGenerator.uniform(0, 100).generate(42, 20, ["Quantity", "Price"]) \
  .select(lambda row: row["Quantity"] >= 50) \
  .compute_column("Total", lambda row: row["Quantity"] * row["Price"])

print(df)
print(df.summarize("sum", operator.add))
print(df.statistics().describe("Total"))
