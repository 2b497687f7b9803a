from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('api', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='leave',
            name='response_note',
            field=models.TextField(blank=True, default=''),
        ),
        migrations.AddField(
            model_name='leave',
            name='responded_by',
            field=models.CharField(blank=True, default='', max_length=150),
        ),
        migrations.AddField(
            model_name='leave',
            name='responded_at',
            field=models.DateTimeField(blank=True, null=True),
        ),
    ]
