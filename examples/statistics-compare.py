"""Compare two generated samples with a t-test and a correlation."""
from numframe import RandomFrameGenerator

control = RandomFrameGenerator.gaussian(10.0, 2.0).generate(1, 200, ["control"])
treated = RandomFrameGenerator.gaussian(10.5, 2.0).generate(2, 200, ["treated"])

df = control.expand(0, "treated")
for row in treated.get_rows():
    df.set_value(row.index, "treated", row["treated"])

stats = df.statistics()
print(f"t-test p-value: {stats.t_test('control', 'treated'):.4f}")
print(f"correlation: {stats.pearsons_correlation('control', 'treated'):.4f}")
print(f"control vs 10: {stats.t_test('control', 10.0):.4f}")
