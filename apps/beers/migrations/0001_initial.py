from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="BeerRecord",
            fields=[
                ("id", models.BigIntegerField(primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=45)),
                ("brewery", models.CharField(max_length=45)),
                ("country", models.CharField(max_length=45)),
                ("price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("currency", models.CharField(max_length=32)),
            ],
            options={
                "db_table": "beer",
                "ordering": ["id"],
            },
        ),
    ]
