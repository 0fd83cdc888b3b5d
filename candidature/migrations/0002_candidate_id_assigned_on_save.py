from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("candidature", "0001_initial"),
    ]

    operations = [
        migrations.AlterField(
            model_name="candidate",
            name="id",
            field=models.UUIDField(editable=False, primary_key=True, serialize=False),
        ),
    ]
