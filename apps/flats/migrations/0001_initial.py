# Generated manually for flats app

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Flat',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('flat_number', models.CharField(db_index=True, max_length=20, unique=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'flats',
                'ordering': ['flat_number'],
            },
        ),
        migrations.CreateModel(
            name='FlatLink',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('from_flat', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='outgoing_links', to='flats.flat')),
                ('to_flat', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='incoming_links', to='flats.flat')),
            ],
            options={
                'db_table': 'flat_links',
                'ordering': ['id'],
                'unique_together': {('from_flat', 'to_flat')},
            },
        ),
        migrations.AddField(
            model_name='flat',
            name='connected_flats',
            field=models.ManyToManyField(blank=True, through='flats.FlatLink', through_fields=('from_flat', 'to_flat'), to='flats.flat'),
        ),
    ]
